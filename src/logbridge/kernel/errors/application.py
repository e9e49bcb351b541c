"""Kernel errors – application-layer errors for caller contract violations."""

from __future__ import annotations

from typing import Any

from logbridge.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class ArgumentMissingError(ApplicationError, ValueError):
    """A required argument was ``None``.

    Raised synchronously for programming errors such as constructing a
    logger without a provider or logging without a formatter.
    """

    default_code = "argument_missing"

    def __init__(
        self,
        argument_name: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message or f"Argument '{argument_name}' must not be None",
            detail={"argument": argument_name},
            **kwargs,
        )
        self.argument_name = argument_name


__all__ = ["ApplicationError", "ArgumentMissingError"]
