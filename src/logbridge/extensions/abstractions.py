"""Extensions – the host logging abstraction the bridge plugs into.

Host code logs through a :class:`FrameworkLogger` obtained from a
:class:`LoggerProvider`; it never sees the engine types in
:mod:`logbridge.events`.
"""
from __future__ import annotations

from contextlib import AbstractContextManager
from enum import IntEnum
from typing import Any, Callable, Iterable, Protocol, runtime_checkable

#: Key under which structured state carries its message template text.
#: Shared by the translator and the scope enrichment, both of which skip it.
ORIGINAL_FORMAT = "{OriginalFormat}"

Formatter = Callable[[Any, BaseException | None], str]


class LogLevel(IntEnum):
    """Host severity, lowest first.  ``NONE`` disables logging."""

    TRACE = 0
    DEBUG = 1
    INFORMATION = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5
    NONE = 6


@runtime_checkable
class LogValues(Protocol):
    """Structured state: exposes ordered ``(name, value)`` pairs."""

    def get_values(self) -> Iterable[tuple[str, Any]]: ...


class FrameworkLogger(Protocol):
    """Port: logger as seen by host code."""

    def log(
        self,
        level: LogLevel,
        event_id: int,
        state: Any,
        exception: BaseException | None,
        formatter: Formatter | None,
    ) -> None: ...

    def is_enabled(self, level: LogLevel) -> bool: ...

    def begin_scope(self, state: Any) -> AbstractContextManager[Any]: ...


class LoggerProvider(Protocol):
    """Port: factory of named :class:`FrameworkLogger` instances."""

    def create_logger(self, name: str) -> FrameworkLogger: ...

    def close(self) -> None: ...


def default_formatter(state: Any, exception: BaseException | None) -> str:  # noqa: ARG001
    return "[null]" if state is None else str(state)


__all__ = [
    "ORIGINAL_FORMAT",
    "Formatter",
    "FrameworkLogger",
    "LogLevel",
    "LogValues",
    "LoggerProvider",
    "default_formatter",
]
