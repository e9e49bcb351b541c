"""Testing fixtures – in_memory_sink, event_logger, bridge_provider."""
from __future__ import annotations

try:
    import pytest

    @pytest.fixture
    def in_memory_sink():
        """Pytest fixture: a fresh :class:`InMemorySink`."""
        from logbridge.testing.fakes import InMemorySink
        return InMemorySink()

    @pytest.fixture
    def event_logger(in_memory_sink):
        """Pytest fixture: VERBOSE-level event logger writing to ``in_memory_sink``."""
        from logbridge.events import EventLogger, LogEventLevel
        from logbridge.testing.fakes import FakeClock
        return EventLogger(
            [in_memory_sink],
            minimum_level=LogEventLevel.VERBOSE,
            clock=FakeClock(),
        )

    @pytest.fixture
    def bridge_provider(event_logger):
        """Pytest fixture: provider bound to ``event_logger``."""
        from logbridge.extensions import BridgeLoggerProvider
        with BridgeLoggerProvider(event_logger) as provider:
            yield provider

except ImportError:
    pass

__all__ = ["bridge_provider", "event_logger", "in_memory_sink"]
