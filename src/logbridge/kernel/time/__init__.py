"""Kernel time – clocks."""
from logbridge.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
