"""Config settings – SettingsLoader port and EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from logbridge.config.settings.base import Settings
from logbridge.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def _to_bool(raw: str) -> bool:
    key = raw.strip().lower()
    if key in _TRUE:
        return True
    if key in _FALSE:
        return False
    raise ValueError(raw)


def _to_int(raw: str) -> int:
    return int(raw.strip())


# keyed by annotation name; annotations are strings under postponed evaluation
_COERCERS: dict[str, Callable[[str], Any]] = {"bool": _to_bool, "int": _to_int}


class SettingsLoader(abc.ABC):
    """Port: build a :class:`Settings` subclass from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Read each field from ``settings_class.env_key(field)``.

    Fields whose variable is unset keep their default.  Values are coerced
    by annotation (``bool``, ``int``; everything else stays a string).

    Raises:
        MissingRequiredSettingError: a field without a default is unset.
        InvalidSettingValueError: a value fails coercion or validation.
        ConfigError: the settings class rejects the arguments.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            env_key = settings_class.env_key(field.name)
            raw = environ.get(env_key)
            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING
                ):
                    raise MissingRequiredSettingError(env_key)
                continue
            kwargs[field.name] = self._coerce(env_key, raw, field.type)

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Cannot build {settings_class.__name__}: {exc}") from exc

    @staticmethod
    def _coerce(env_key: str, raw: str, type_hint: Any) -> Any:
        name = type_hint if isinstance(type_hint, str) else getattr(type_hint, "__name__", "")
        coerce = _COERCERS.get(name)
        if coerce is None:
            return raw
        try:
            return coerce(raw)
        except ValueError:
            raise InvalidSettingValueError(env_key, raw, f"not a valid {name}") from None


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
