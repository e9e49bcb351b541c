"""Testing fixtures – pytest fixtures for the sink and provider doubles."""
try:
    import pytest  # noqa: F401

    from logbridge.testing.fixtures.sink import bridge_provider, event_logger, in_memory_sink

except ImportError:
    pass

__all__ = [
    "bridge_provider",
    "event_logger",
    "in_memory_sink",
]
