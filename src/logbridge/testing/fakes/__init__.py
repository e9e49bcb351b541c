"""Testing fakes – in-memory doubles for engine ports."""
from logbridge.testing.fakes.clock import FakeClock
from logbridge.testing.fakes.sink import InMemorySink

__all__ = ["FakeClock", "InMemorySink"]
