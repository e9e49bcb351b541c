"""Kernel – framework-agnostic building blocks."""

from logbridge.kernel.errors import ApplicationError, ArgumentMissingError, BaseError

__all__ = [
    "ApplicationError",
    "ArgumentMissingError",
    "BaseError",
]
