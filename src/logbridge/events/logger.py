"""Events – EventLogger, the writer that enriches events and feeds sinks.

An :class:`EventLogger` is immutable: :meth:`EventLogger.for_context` and
:meth:`EventLogger.for_enrichers` return derived loggers that share the
sinks, minimum level and clock of their parent.

Enrichment order inside :meth:`EventLogger.write`:

1. fixed context properties, oldest binding first, each added only if
   absent, so the first binding of a name wins;
2. registered enrichers, in registration order.

Enricher and sink failures are reported on :data:`selflog` and never reach
the caller.
"""
from __future__ import annotations

from typing import Any, Iterable

import structlog

from logbridge.events.event import LogEvent
from logbridge.events.levels import LogEventLevel
from logbridge.events.ports import Enricher, LogEventPropertyFactory, Sink
from logbridge.events.properties import PropertyFactory
from logbridge.kernel.errors import BaseError
from logbridge.kernel.time import Clock, SystemClock

selflog = structlog.get_logger("logbridge.selflog")


def _describe(exc: Exception) -> Any:
    return exc.to_dict() if isinstance(exc, BaseError) else repr(exc)


class _FixedPropertyEnricher:
    __slots__ = ("name", "value", "destructure")

    def __init__(self, name: str, value: Any, destructure: bool) -> None:
        self.name = name
        self.value = value
        self.destructure = destructure

    def enrich(self, event: LogEvent, property_factory: LogEventPropertyFactory) -> None:
        event.add_property_if_absent(
            property_factory.create_property(self.name, self.value, self.destructure)
        )


class EventLogger:
    """Level-filtered, enriching event writer.

    Parameters
    ----------
    sinks:
        Destinations that receive every enabled, enriched event.
    minimum_level:
        Events below this level are dropped by :meth:`write` and reported
        disabled by :meth:`is_enabled`.
    enrichers:
        Enrichers run on every event after the fixed context properties.
    clock:
        Timestamp source for events built by callers of this logger.
    """

    def __init__(
        self,
        sinks: Iterable[Sink] = (),
        *,
        minimum_level: LogEventLevel = LogEventLevel.INFORMATION,
        enrichers: Iterable[Enricher] = (),
        clock: Clock | None = None,
        property_factory: PropertyFactory | None = None,
    ) -> None:
        self._sinks: tuple[Sink, ...] = tuple(sinks)
        self._minimum_level = LogEventLevel(minimum_level)
        self._enrichers: tuple[Enricher, ...] = tuple(enrichers)
        self._context: tuple[_FixedPropertyEnricher, ...] = ()
        self._clock: Clock = clock or SystemClock()
        self._property_factory = property_factory or PropertyFactory()

    @property
    def minimum_level(self) -> LogEventLevel:
        return self._minimum_level

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def property_factory(self) -> PropertyFactory:
        return self._property_factory

    def is_enabled(self, level: LogEventLevel) -> bool:
        return level >= self._minimum_level

    def for_context(self, name: str, value: Any, destructure: bool = False) -> "EventLogger":
        """Return a logger that attaches *name* = *value* to every event.

        An empty *name* is ignored and ``self`` is returned.
        """
        if not name:
            return self
        derived = self._copy()
        derived._context = self._context + (_FixedPropertyEnricher(name, value, destructure),)
        return derived

    def for_enrichers(self, *enrichers: Enricher) -> "EventLogger":
        """Return a logger that additionally runs *enrichers* on every event."""
        derived = self._copy()
        derived._enrichers = self._enrichers + enrichers
        return derived

    def write(self, event: LogEvent) -> None:
        if not self.is_enabled(event.level):
            return

        for fixed in self._context:
            fixed.enrich(event, self._property_factory)
        for enricher in self._enrichers:
            try:
                enricher.enrich(event, self._property_factory)
            except Exception as exc:  # noqa: BLE001 – enrichers must not break logging
                selflog.warning(
                    "enricher_failed",
                    enricher=type(enricher).__name__,
                    error=_describe(exc),
                    exc_info=True,
                )

        for sink in self._sinks:
            try:
                sink.emit(event)
            except Exception as exc:  # noqa: BLE001 – sinks must not break logging
                selflog.warning(
                    "sink_failed",
                    sink=type(sink).__name__,
                    error=_describe(exc),
                    exc_info=True,
                )

    def _copy(self) -> "EventLogger":
        derived = object.__new__(EventLogger)
        derived.__dict__.update(self.__dict__)
        return derived


class Log:
    """Process-wide default :class:`EventLogger`.

    Silent (no sinks) until :meth:`set_logger` installs a configured one.
    """

    logger: EventLogger = EventLogger()

    @classmethod
    def set_logger(cls, logger: EventLogger) -> None:
        cls.logger = logger

    @classmethod
    def reset(cls) -> None:
        cls.logger = EventLogger()


__all__ = ["EventLogger", "Log", "selflog"]
