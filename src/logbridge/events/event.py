"""Events – LogEvent and LogEventProperty."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from types import MappingProxyType
from typing import Mapping

from logbridge.events.levels import LogEventLevel
from logbridge.events.template import MessageTemplate
from logbridge.events.values import LogEventPropertyValue


@dataclasses.dataclass(frozen=True, slots=True)
class LogEventProperty:
    """A named, captured property value."""

    name: str
    value: LogEventPropertyValue

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Property name must not be empty")


class LogEvent:
    """One structured log occurrence.

    Timestamp, level, exception and template are fixed at construction.
    The property set only grows: enrichers add to it while the event passes
    through :meth:`EventLogger.write`, before it reaches any sink.
    """

    __slots__ = ("_timestamp", "_level", "_exception", "_template", "_properties")

    def __init__(
        self,
        timestamp: datetime,
        level: LogEventLevel,
        exception: BaseException | None,
        message_template: MessageTemplate,
        properties: list[LogEventProperty] | tuple[LogEventProperty, ...] = (),
    ) -> None:
        self._timestamp = timestamp
        self._level = level
        self._exception = exception
        self._template = message_template
        self._properties: dict[str, LogEventPropertyValue] = {}
        for prop in properties:
            self.add_or_update_property(prop)

    @property
    def timestamp(self) -> datetime:
        return self._timestamp

    @property
    def level(self) -> LogEventLevel:
        return self._level

    @property
    def exception(self) -> BaseException | None:
        return self._exception

    @property
    def message_template(self) -> MessageTemplate:
        return self._template

    @property
    def properties(self) -> Mapping[str, LogEventPropertyValue]:
        return MappingProxyType(self._properties)

    def add_property_if_absent(self, prop: LogEventProperty) -> None:
        self._properties.setdefault(prop.name, prop.value)

    def add_or_update_property(self, prop: LogEventProperty) -> None:
        self._properties[prop.name] = prop.value

    def render_message(self) -> str:
        return self._template.render(self._properties)

    def __repr__(self) -> str:
        return (
            f"LogEvent(level={self._level.name}, template={self._template.text!r}, "
            f"properties={sorted(self._properties)})"
        )


__all__ = ["LogEvent", "LogEventProperty"]
