"""Extensions – LoggerScope, one link of the ambient scope chain."""
from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from logbridge.extensions.provider import BridgeLoggerProvider


class LoggerScope:
    """An open scope; also the handle that closes it.

    Opening pushes the scope onto the provider's chain for the current
    execution context.  Closing removes it from the chain of the context
    that closes it and nowhere else: a task forked while the scope was open
    keeps it until that task closes it or finishes.  Closing a scope that
    is not the innermost one (out-of-order disposal) removes just that
    scope; closing twice, or from a context where it is not open, does
    nothing.

    Usage::

        with logger.begin_scope({"OrderId": 42}):
            logger.information("Shipping {Carrier}", "UPS")
    """

    __slots__ = ("_provider", "name", "state", "parent")

    def __init__(self, provider: BridgeLoggerProvider, name: str | None, state: Any) -> None:
        self._provider = provider
        self.name = name
        self.state = tuple(state) if isinstance(state, Iterator) else state
        self.parent: LoggerScope | None = provider.current_scope
        provider._push(self)

    def dispose(self) -> None:
        self._provider._pop(self)

    close = dispose

    def __enter__(self) -> "LoggerScope":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.dispose()

    def __repr__(self) -> str:
        return f"LoggerScope(name={self.name!r}, state={self.state!r})"


__all__ = ["LoggerScope"]
