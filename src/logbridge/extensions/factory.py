"""Extensions – BridgeLoggerFactory: one-call bootstrap from settings."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from logbridge.config.settings import EnvSettingsLoader, LogBridgeSettings
from logbridge.config.validation import ConfigError
from logbridge.events.levels import LogEventLevel
from logbridge.events.logger import EventLogger, Log, selflog
from logbridge.events.sinks import StructlogSink
from logbridge.extensions.processors import ScopeProcessor
from logbridge.extensions.provider import BridgeLoggerProvider

_STDLIB_LEVELS: dict[LogEventLevel, int] = {
    LogEventLevel.VERBOSE: logging.DEBUG,
    LogEventLevel.DEBUG: logging.DEBUG,
    LogEventLevel.INFORMATION: logging.INFO,
    LogEventLevel.WARNING: logging.WARNING,
    LogEventLevel.ERROR: logging.ERROR,
    LogEventLevel.FATAL: logging.CRITICAL,
}


class BridgeLoggerFactory:
    """Configure structlog output and return a ready provider.

    Usage::

        provider = BridgeLoggerFactory.configure()
        log = provider.create_logger(__name__)
        with log.begin_scope({"RequestId": rid}):
            log.information("Handled {Path}", path)
    """

    @staticmethod
    def configure(settings: LogBridgeSettings | None = None) -> BridgeLoggerProvider:
        """Build the event logger, install it as ``Log.logger`` and wrap it.

        *settings* defaults to :class:`LogBridgeSettings` loaded from the
        environment.  Raises :class:`~logbridge.config.ConfigError` when the
        environment holds an invalid value.
        """
        if settings is None:
            try:
                settings = EnvSettingsLoader().load(LogBridgeSettings)
            except ConfigError as exc:
                selflog.error("settings_invalid", **exc.to_dict())
                raise
        level = settings.level

        event_logger = EventLogger(
            [StructlogSink(name=settings.logger_name)],
            minimum_level=level,
        )
        provider = BridgeLoggerProvider(event_logger, legacy_levels=settings.legacy_levels)

        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            ScopeProcessor(provider),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer()
            if settings.json_output
            else structlog.dev.ConsoleRenderer()
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.format_exc_info,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(_STDLIB_LEVELS[level])

        Log.set_logger(event_logger)
        return provider


__all__ = ["BridgeLoggerFactory"]
