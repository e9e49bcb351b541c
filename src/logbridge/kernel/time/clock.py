"""Kernel time – Clock port for event timestamps."""
from __future__ import annotations

from datetime import UTC, datetime
from typing import Protocol


class Clock(Protocol):
    """Port: source of event timestamps."""

    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock in UTC; the default for :class:`~logbridge.events.EventLogger`."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """Clock that always reports the instant it was given."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed


__all__ = ["Clock", "FrozenClock", "SystemClock"]
