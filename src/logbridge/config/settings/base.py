"""Config settings – Settings, base for environment-backed settings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass settings read from ``{PREFIX}_{FIELD}`` variables.

    Subclasses set ``_prefix`` and override :meth:`_validate` to reject
    values with :class:`~logbridge.config.InvalidSettingValueError`.
    Validation runs on construction, whether the instance comes from a
    loader or is built in code.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Field checks; the base accepts everything."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable that holds *field_name*, e.g. ``LOGBRIDGE_MINIMUM_LEVEL``."""
        return "_".join(part for part in (cls._prefix, field_name) if part).upper()


__all__ = ["Settings"]
