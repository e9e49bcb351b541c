"""Kernel errors – BaseError, root of the logbridge error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Error with a stable ``code`` and structured ``detail``.

    :meth:`to_dict` gives the key/values that :data:`~logbridge.events.selflog`
    attaches when a bridge component reports one of these errors.

    Args:
        message: Human-readable description.
        code: Machine-readable slug; defaults to the class ``default_code``.
        detail: Extra context, kept as plain values so it can be logged.
        cause: Underlying exception, stored as ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        """The chained exception, whether passed in or set by ``raise ... from``."""
        return self.__cause__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "error_type": type(self).__name__,
            "code": self.code,
            "message": self.message,
        }
        if self.detail:
            payload["detail"] = self.detail
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


__all__ = ["BaseError"]
