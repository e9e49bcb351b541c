"""Events – engine severity levels."""
from __future__ import annotations

from enum import IntEnum


class LogEventLevel(IntEnum):
    """Severity of a :class:`~logbridge.events.event.LogEvent`, lowest first."""

    VERBOSE = 0
    DEBUG = 1
    INFORMATION = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5


_ALIASES: dict[str, LogEventLevel] = {
    "trace": LogEventLevel.VERBOSE,
    "info": LogEventLevel.INFORMATION,
    "warn": LogEventLevel.WARNING,
    "critical": LogEventLevel.FATAL,
}


def parse_level(name: str) -> LogEventLevel:
    """Resolve a case-insensitive level name (``"info"``, ``"Warning"``, …).

    Raises:
        ValueError: when *name* matches no level or alias.
    """
    key = name.strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return LogEventLevel[key.upper()]
    except KeyError:
        raise ValueError(f"Unknown log level {name!r}") from None


__all__ = ["LogEventLevel", "parse_level"]
