"""Extensions – BridgeLogger: translate host log calls into engine events."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from logbridge.events.event import LogEvent
from logbridge.events.logger import EventLogger, Log
from logbridge.events.template import MessageTemplateParser
from logbridge.extensions.abstractions import (
    ORIGINAL_FORMAT,
    Formatter,
    LogLevel,
    default_formatter,
)
from logbridge.extensions.levels import convert_level
from logbridge.extensions.state import (
    FormattedLogValues,
    Structured,
    classify_state,
    is_generic_type,
    split_sigil,
)
from logbridge.kernel.errors import ArgumentMissingError

if TYPE_CHECKING:
    from logbridge.extensions.provider import BridgeLoggerProvider
    from logbridge.extensions.scope import LoggerScope

SOURCE_CONTEXT = "SourceContext"
EVENT_ID = "EventId"


class BridgeLogger:
    """Host-facing logger that writes structured events.

    Normally obtained from :meth:`BridgeLoggerProvider.create_logger`.  A
    non-empty *name* is attached to every event as ``SourceContext``.

    Usage::

        log = provider.create_logger("orders")
        log.information("Hello, {Recipient}", "World")
        log.log(LogLevel.WARNING, 17, {"Attempt": 3}, None, default_formatter)
    """

    _parser = MessageTemplateParser()

    def __init__(
        self,
        provider: BridgeLoggerProvider | None,
        logger: EventLogger | None = None,
        name: str | None = None,
    ) -> None:
        if provider is None:
            raise ArgumentMissingError("provider")
        self._provider = provider
        self._name = name
        # a logger handed over by the provider already carries it as enricher
        self._logger = logger if logger is not None else Log.logger.for_enrichers(provider)
        if name:
            self._logger = self._logger.for_context(SOURCE_CONTEXT, name)

    @property
    def name(self) -> str | None:
        return self._name

    def is_enabled(self, level: LogLevel) -> bool:
        return self._logger.is_enabled(convert_level(level, legacy=self._provider.legacy_levels))

    def begin_scope(self, state: Any) -> LoggerScope:
        return self._provider.begin_scope(self._name, state)

    def log(
        self,
        level: LogLevel,
        event_id: int,
        state: Any,
        exception: BaseException | None,
        formatter: Formatter | None,
    ) -> None:
        event_level = convert_level(level, legacy=self._provider.legacy_levels)
        if not self._logger.is_enabled(event_level):
            return
        if formatter is None:
            raise ArgumentMissingError("formatter")

        logger = self._logger
        template: str | None = None

        match classify_state(state):
            case Structured(pairs):
                for key, value in pairs:
                    if key == ORIGINAL_FORMAT and isinstance(value, str):
                        template = value
                        continue
                    name, destructure = split_sigil(key)
                    if name:
                        logger = logger.for_context(name, value, destructure=destructure)

                state_type = type(state)
                if template is None and not is_generic_type(state_type):
                    template = "{" + state_type.__name__ + ":l}"
                    logger = logger.for_context(state_type.__name__, formatter(state, None))

        if template is None and state is not None:
            template = "{State:l}"
            logger = logger.for_context("State", formatter(state, None))

        if not template:
            return

        if event_id != 0:
            logger = logger.for_context(EVENT_ID, event_id)

        event = LogEvent(
            logger.clock.now(),
            event_level,
            exception,
            self._parser.parse(template),
        )
        logger.write(event)

    # ------------------------------------------------------------------
    # Message-template shorthands
    # ------------------------------------------------------------------

    def _log_message(
        self,
        level: LogLevel,
        message: str | None,
        args: tuple[Any, ...],
        event_id: int,
        exc: BaseException | None,
    ) -> None:
        if not self.is_enabled(level):
            return
        self.log(level, event_id, FormattedLogValues(message, *args), exc, default_formatter)

    def trace(self, message: str | None, *args: Any, event_id: int = 0, exc: BaseException | None = None) -> None:
        self._log_message(LogLevel.TRACE, message, args, event_id, exc)

    def debug(self, message: str | None, *args: Any, event_id: int = 0, exc: BaseException | None = None) -> None:
        self._log_message(LogLevel.DEBUG, message, args, event_id, exc)

    def information(self, message: str | None, *args: Any, event_id: int = 0, exc: BaseException | None = None) -> None:
        self._log_message(LogLevel.INFORMATION, message, args, event_id, exc)

    def warning(self, message: str | None, *args: Any, event_id: int = 0, exc: BaseException | None = None) -> None:
        self._log_message(LogLevel.WARNING, message, args, event_id, exc)

    def error(self, message: str | None, *args: Any, event_id: int = 0, exc: BaseException | None = None) -> None:
        self._log_message(LogLevel.ERROR, message, args, event_id, exc)

    def critical(self, message: str | None, *args: Any, event_id: int = 0, exc: BaseException | None = None) -> None:
        self._log_message(LogLevel.CRITICAL, message, args, event_id, exc)

    # common alias
    info = information

    def __repr__(self) -> str:
        return f"BridgeLogger(name={self._name!r})"


__all__ = ["EVENT_ID", "SOURCE_CONTEXT", "BridgeLogger"]
