"""Events – StructlogSink: forward enriched events to structlog.

Usage::

    import structlog
    from logbridge.events import EventLogger, StructlogSink

    logger = EventLogger([StructlogSink(structlog.get_logger("app"))])
"""
from __future__ import annotations

from typing import Any

import structlog

from logbridge.events.event import LogEvent
from logbridge.events.levels import LogEventLevel

_METHODS: dict[LogEventLevel, str] = {
    LogEventLevel.VERBOSE: "debug",
    LogEventLevel.DEBUG: "debug",
    LogEventLevel.INFORMATION: "info",
    LogEventLevel.WARNING: "warning",
    LogEventLevel.ERROR: "error",
    LogEventLevel.FATAL: "critical",
}

# structlog positional/control arguments that a property must not shadow
_RESERVED: dict[str, str] = {"event": "event_", "exc_info": "exc_info_", "stack_info": "stack_info_"}


class StructlogSink:
    """Render each event's message and pass its properties as key/values.

    The structlog ``event`` is the rendered message.  The raw template text
    travels as ``message_template`` and the original engine level as
    ``log_event_level`` so processors can keep VERBOSE apart from DEBUG.
    """

    def __init__(self, logger: Any = None, name: str = "logbridge") -> None:
        self._logger = logger if logger is not None else structlog.get_logger(name)

    def emit(self, event: LogEvent) -> None:
        kwargs: dict[str, Any] = {
            _RESERVED.get(name, name): value.to_python() for name, value in event.properties.items()
        }
        kwargs["message_template"] = event.message_template.text
        kwargs["log_event_level"] = event.level.name
        if event.exception is not None:
            kwargs["exc_info"] = event.exception
        method = getattr(self._logger, _METHODS.get(event.level, "info"))
        method(event.render_message(), **kwargs)


__all__ = ["StructlogSink"]
