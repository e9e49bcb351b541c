"""Extensions – host logging abstraction bridged onto structured events."""
from logbridge.extensions.abstractions import (
    ORIGINAL_FORMAT,
    Formatter,
    FrameworkLogger,
    LoggerProvider,
    LogLevel,
    LogValues,
    default_formatter,
)
from logbridge.extensions.levels import convert_level
from logbridge.extensions.logger import EVENT_ID, SOURCE_CONTEXT, BridgeLogger
from logbridge.extensions.provider import BridgeLoggerProvider
from logbridge.extensions.scope import LoggerScope
from logbridge.extensions.state import FormattedLogValues, classify_state
from logbridge.extensions.processors import ScopeProcessor
from logbridge.extensions.factory import BridgeLoggerFactory

__all__ = [
    "EVENT_ID",
    "ORIGINAL_FORMAT",
    "SOURCE_CONTEXT",
    "BridgeLogger",
    "BridgeLoggerFactory",
    "BridgeLoggerProvider",
    "FormattedLogValues",
    "Formatter",
    "FrameworkLogger",
    "LogLevel",
    "LogValues",
    "LoggerProvider",
    "LoggerScope",
    "ScopeProcessor",
    "classify_state",
    "convert_level",
    "default_formatter",
]
