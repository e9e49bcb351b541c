"""Events – property value model.

A property value is one of four shapes:

* :class:`ScalarValue` – an atomic value captured as-is.
* :class:`SequenceValue` – an ordered collection of values.
* :class:`DictionaryValue` – a mapping of scalar keys to values.
* :class:`StructureValue` – a destructured object with a type tag.

Values render the way they appear inside a formatted message: strings are
double-quoted unless the ``l`` (literal) format is requested.
"""
from __future__ import annotations

import abc
import dataclasses
from typing import Any


class LogEventPropertyValue(abc.ABC):
    """Base class for captured property values."""

    @abc.abstractmethod
    def render(self, fmt: str | None = None) -> str: ...

    @abc.abstractmethod
    def to_python(self) -> Any:
        """Return the plain Python form of this value (for sinks)."""

    def __str__(self) -> str:
        return self.render()


@dataclasses.dataclass(frozen=True, slots=True)
class ScalarValue(LogEventPropertyValue):
    value: Any

    def render(self, fmt: str | None = None) -> str:
        value = self.value
        if value is None:
            return "null"
        if isinstance(value, str):
            return value if fmt == "l" else f'"{value}"'
        if isinstance(value, bool):
            return "True" if value else "False"
        if fmt and fmt != "l":
            try:
                return format(value, fmt)
            except (TypeError, ValueError):
                return str(value)
        return str(value)

    def to_python(self) -> Any:
        return self.value


@dataclasses.dataclass(frozen=True, slots=True)
class SequenceValue(LogEventPropertyValue):
    elements: tuple[LogEventPropertyValue, ...]

    def render(self, fmt: str | None = None) -> str:
        return "[" + ", ".join(e.render() for e in self.elements) + "]"

    def to_python(self) -> Any:
        return [e.to_python() for e in self.elements]


@dataclasses.dataclass(frozen=True, slots=True)
class DictionaryValue(LogEventPropertyValue):
    elements: tuple[tuple[ScalarValue, LogEventPropertyValue], ...]

    def render(self, fmt: str | None = None) -> str:
        body = ", ".join(f"[{k.render()}]: {v.render()}" for k, v in self.elements)
        return "[" + body + "]"

    def to_python(self) -> Any:
        return {k.to_python(): v.to_python() for k, v in self.elements}


@dataclasses.dataclass(frozen=True, slots=True)
class StructureValue(LogEventPropertyValue):
    properties: tuple[tuple[str, LogEventPropertyValue], ...]
    type_tag: str | None = None

    def render(self, fmt: str | None = None) -> str:
        body = ", ".join(f"{name}: {value.render()}" for name, value in self.properties)
        prefix = f"{self.type_tag} " if self.type_tag else ""
        return prefix + ("{ " + body + " }" if body else "{ }")

    def to_python(self) -> Any:
        result: dict[str, Any] = {name: value.to_python() for name, value in self.properties}
        if self.type_tag:
            result["_typeTag"] = self.type_tag
        return result


__all__ = [
    "DictionaryValue",
    "LogEventPropertyValue",
    "ScalarValue",
    "SequenceValue",
    "StructureValue",
]
