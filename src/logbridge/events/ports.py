"""Events – ports implemented by enrichers and sinks."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from logbridge.events.event import LogEvent, LogEventProperty


class LogEventPropertyFactory(Protocol):
    """Port: capture a Python value as a :class:`LogEventProperty`."""

    def create_property(self, name: str, value: Any, destructure: bool = False) -> LogEventProperty: ...


@runtime_checkable
class Enricher(Protocol):
    """Port: add properties to an event during ``write``."""

    def enrich(self, event: LogEvent, property_factory: LogEventPropertyFactory) -> None: ...


@runtime_checkable
class Sink(Protocol):
    """Port: final destination of enriched events."""

    def emit(self, event: LogEvent) -> None: ...


__all__ = ["Enricher", "LogEventPropertyFactory", "Sink"]
