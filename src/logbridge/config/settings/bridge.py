"""Config settings – LogBridgeSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from logbridge.config.settings.base import Settings
from logbridge.config.validation import InvalidSettingValueError
from logbridge.events.levels import LogEventLevel, parse_level


@dataclasses.dataclass
class LogBridgeSettings(Settings):
    """Bridge configuration, read from ``LOGBRIDGE_*`` variables.

    Attributes
    ----------
    minimum_level:
        Lowest engine level written (``verbose``/``trace``, ``debug``,
        ``information``/``info``, ``warning``/``warn``, ``error``,
        ``fatal``/``critical``).
    legacy_levels:
        Map host ``DEBUG`` to engine ``VERBOSE``.
    json_output:
        Render structlog output as JSON rather than console text.
    logger_name:
        Name of the structlog logger the sink writes to.
    """

    _prefix: ClassVar[str] = "LOGBRIDGE"

    minimum_level: str = "information"
    legacy_levels: bool = False
    json_output: bool = True
    logger_name: str = "logbridge"

    def _validate(self) -> None:
        try:
            parse_level(self.minimum_level)
        except ValueError:
            raise InvalidSettingValueError(
                "minimum_level", self.minimum_level, "not a known log level"
            ) from None
        if not self.logger_name:
            raise InvalidSettingValueError("logger_name", self.logger_name, "must not be empty")

    @property
    def level(self) -> LogEventLevel:
        return parse_level(self.minimum_level)


__all__ = ["LogBridgeSettings"]
