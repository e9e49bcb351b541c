"""Events – PropertyFactory: capture Python values as property values.

Capturing rules:

* Scalars (``None``, numbers, strings, bytes, dates, UUIDs, enums, …) are
  kept as-is in a :class:`ScalarValue`.
* Mappings become :class:`DictionaryValue`, other non-string iterables
  (lists, tuples, sets) become :class:`SequenceValue`.
* Any other object is kept by reference in a :class:`ScalarValue` and
  rendered with ``str()``. When destructuring is requested, instead,
  dataclasses, pydantic-style models and plain objects are
  decomposed into a :class:`StructureValue` tagged with the class name.

Nesting is capped at :attr:`PropertyFactory.max_depth`; deeper values are
captured as ``null``.
"""
from __future__ import annotations

import dataclasses
import datetime as _dt
import decimal
import enum
import uuid
from collections.abc import Iterable, Mapping
from typing import Any

from logbridge.events.event import LogEventProperty
from logbridge.events.values import (
    DictionaryValue,
    LogEventPropertyValue,
    ScalarValue,
    SequenceValue,
    StructureValue,
)

_SCALAR_TYPES: tuple[type, ...] = (
    str,
    bytes,
    bool,
    int,
    float,
    complex,
    decimal.Decimal,
    _dt.datetime,
    _dt.date,
    _dt.time,
    _dt.timedelta,
    uuid.UUID,
    enum.Enum,
)


class PropertyFactory:
    """Default :class:`~logbridge.events.ports.LogEventPropertyFactory`."""

    max_depth: int = 10

    def create_property(self, name: str, value: Any, destructure: bool = False) -> LogEventProperty:
        return LogEventProperty(name, self.create_value(value, destructure))

    def create_value(self, value: Any, destructure: bool = False, depth: int = 0) -> LogEventPropertyValue:
        if isinstance(value, LogEventPropertyValue):
            return value
        if value is None or isinstance(value, _SCALAR_TYPES):
            return ScalarValue(value)
        if depth >= self.max_depth:
            return ScalarValue(None)

        nested = depth + 1
        if isinstance(value, Mapping):
            return DictionaryValue(
                tuple(
                    (ScalarValue(k), self.create_value(v, destructure, nested))
                    for k, v in value.items()
                )
            )
        if isinstance(value, (list, tuple, set, frozenset)) or (
            destructure and isinstance(value, Iterable)
        ):
            return SequenceValue(tuple(self.create_value(v, destructure, nested) for v in value))
        if destructure:
            return self._structure(value, nested)
        return ScalarValue(value)

    def _structure(self, value: Any, depth: int) -> LogEventPropertyValue:
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            fields = {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
        elif hasattr(value, "model_dump"):
            fields = value.model_dump()
        elif hasattr(value, "__dict__"):
            fields = {k: v for k, v in vars(value).items() if not k.startswith("_")}
        else:
            return ScalarValue(str(value))
        return StructureValue(
            tuple((k, self.create_value(v, True, depth)) for k, v in fields.items()),
            type_tag=type(value).__name__,
        )


__all__ = ["PropertyFactory"]
