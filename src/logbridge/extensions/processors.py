"""Extensions – structlog processor that merges the open scope chain.

Lets plain structlog calls made inside ``begin_scope`` blocks carry the same
ambient properties as bridged events::

    import structlog
    from logbridge.extensions.processors import ScopeProcessor

    structlog.configure(processors=[ScopeProcessor(provider), ...])
"""
from __future__ import annotations

from typing import Any

from logbridge.extensions.provider import BridgeLoggerProvider


class ScopeProcessor:
    """Inject the provider's current scope properties into the event dict.

    Keys already present in the event dict are left untouched; among scopes
    the innermost wins.
    """

    def __init__(self, provider: BridgeLoggerProvider) -> None:
        self._provider = provider

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        for name, value, _ in self._provider.scope_values():
            event_dict.setdefault(name, value)
        return event_dict


__all__ = ["ScopeProcessor"]
