"""Extensions – host level → engine level mapping."""
from __future__ import annotations

from logbridge.events.levels import LogEventLevel
from logbridge.extensions.abstractions import LogLevel

_LEVELS: dict[LogLevel, LogEventLevel] = {
    LogLevel.CRITICAL: LogEventLevel.FATAL,
    LogLevel.ERROR: LogEventLevel.ERROR,
    LogLevel.WARNING: LogEventLevel.WARNING,
    LogLevel.INFORMATION: LogEventLevel.INFORMATION,
    LogLevel.DEBUG: LogEventLevel.DEBUG,
    LogLevel.TRACE: LogEventLevel.VERBOSE,
}


def convert_level(level: LogLevel | int, *, legacy: bool = False) -> LogEventLevel:
    """Map a host level to the engine level.

    Unknown values (``NONE``, foreign ints) map to ``VERBOSE`` so they are
    neither dropped nor over-reported.  *legacy* maps ``DEBUG`` to
    ``VERBOSE`` for hosts whose debug level sits below trace.
    """
    if legacy and level == LogLevel.DEBUG:
        return LogEventLevel.VERBOSE
    try:
        return _LEVELS.get(LogLevel(level), LogEventLevel.VERBOSE)
    except ValueError:
        return LogEventLevel.VERBOSE


__all__ = ["convert_level"]
