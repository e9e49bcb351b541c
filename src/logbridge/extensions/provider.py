"""Extensions – BridgeLoggerProvider: logger factory, scope chain, enricher.

The provider owns the ambient scope chain.  The scopes open in a context
are held, innermost last, as an immutable tuple in a
:class:`contextvars.ContextVar` private to the provider, so:

* each asyncio task (and each ``copy_context().run`` branch) starts with a
  copy of its parent's chain and never sees a sibling's pushes or pops;
* closing a scope rebuilds the chain of the closing context only;
* a coroutine that suspends and resumes, on any thread, sees its own chain.

The provider registers itself as an enricher on the event logger; every
event written through one of its loggers picks up the properties of the
scopes open on the writing path, innermost first.
"""
from __future__ import annotations

import uuid
from contextvars import ContextVar
from typing import Any, Iterator

from logbridge.events.event import LogEvent
from logbridge.events.logger import EventLogger
from logbridge.events.ports import LogEventPropertyFactory
from logbridge.extensions.abstractions import ORIGINAL_FORMAT
from logbridge.extensions.logger import BridgeLogger
from logbridge.extensions.scope import LoggerScope
from logbridge.extensions.state import Structured, classify_state, split_sigil


class BridgeLoggerProvider:
    """Create :class:`BridgeLogger` instances bound to one event logger.

    Parameters
    ----------
    logger:
        Configured event logger.  When ``None`` each created logger falls
        back to the process-wide :attr:`logbridge.events.Log.logger`.
    legacy_levels:
        Map host ``DEBUG`` to engine ``VERBOSE``.
    """

    def __init__(self, logger: EventLogger | None = None, *, legacy_levels: bool = False) -> None:
        self._logger = logger.for_enrichers(self) if logger is not None else None
        self.legacy_levels = legacy_levels
        self._chain: ContextVar[tuple[LoggerScope, ...]] = ContextVar(
            f"logbridge_scope_{uuid.uuid4().hex}", default=()
        )

    @property
    def current_scope(self) -> LoggerScope | None:
        """The innermost scope open in the calling context, or ``None``."""
        chain = self._chain.get()
        return chain[-1] if chain else None

    def _push(self, scope: LoggerScope) -> None:
        self._chain.set(self._chain.get() + (scope,))

    def _pop(self, scope: LoggerScope) -> None:
        chain = self._chain.get()
        if scope in chain:
            self._chain.set(tuple(s for s in chain if s is not scope))

    def create_logger(self, name: str) -> BridgeLogger:
        return BridgeLogger(self, self._logger, name)

    def begin_scope(self, name: str | None, state: Any) -> LoggerScope:
        return LoggerScope(self, name, state)

    def scope_values(self) -> Iterator[tuple[str, Any, bool]]:
        """Yield ``(name, value, destructure)`` from open scopes, innermost first."""
        for scope in reversed(self._chain.get()):
            shape = classify_state(scope.state)
            if not isinstance(shape, Structured):
                continue
            for key, value in shape.pairs:
                if key == ORIGINAL_FORMAT and isinstance(value, str):
                    continue
                name, destructure = split_sigil(key)
                if name:
                    yield name, value, destructure

    def enrich(self, event: LogEvent, property_factory: LogEventPropertyFactory) -> None:
        for name, value, destructure in self.scope_values():
            event.add_property_if_absent(property_factory.create_property(name, value, destructure))

    def close(self) -> None:
        """Nothing to release; scopes close through their own handles."""

    def __enter__(self) -> "BridgeLoggerProvider":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()


__all__ = ["BridgeLoggerProvider"]
