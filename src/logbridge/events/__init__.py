"""Events – the structured-event engine surface the bridge writes to."""
from logbridge.events.event import LogEvent, LogEventProperty
from logbridge.events.levels import LogEventLevel, parse_level
from logbridge.events.logger import EventLogger, Log, selflog
from logbridge.events.ports import Enricher, LogEventPropertyFactory, Sink
from logbridge.events.properties import PropertyFactory
from logbridge.events.sinks import StructlogSink
from logbridge.events.template import (
    MessageTemplate,
    MessageTemplateParser,
    PropertyToken,
    TextToken,
)
from logbridge.events.values import (
    DictionaryValue,
    LogEventPropertyValue,
    ScalarValue,
    SequenceValue,
    StructureValue,
)

__all__ = [
    "DictionaryValue",
    "Enricher",
    "EventLogger",
    "Log",
    "LogEvent",
    "LogEventLevel",
    "LogEventProperty",
    "LogEventPropertyFactory",
    "LogEventPropertyValue",
    "MessageTemplate",
    "MessageTemplateParser",
    "PropertyFactory",
    "PropertyToken",
    "ScalarValue",
    "SequenceValue",
    "Sink",
    "StructlogSink",
    "StructureValue",
    "TextToken",
    "parse_level",
    "selflog",
]
