"""Unit tests for EventLogger, LogEvent and the default Log holder."""

from __future__ import annotations

from typing import Any

import pytest

import logbridge.events.logger as event_logger_module
from logbridge.events import (
    EventLogger,
    Log,
    LogEvent,
    LogEventLevel,
    LogEventProperty,
    MessageTemplateParser,
    ScalarValue,
    parse_level,
)
from logbridge.kernel.errors import ApplicationError
from logbridge.testing import FakeClock, InMemorySink

_parser = MessageTemplateParser()


def _event(level: LogEventLevel = LogEventLevel.INFORMATION, text: str = "hello") -> LogEvent:
    return LogEvent(FakeClock().now(), level, None, _parser.parse(text))


class _BrokenSink:
    def emit(self, event: LogEvent) -> None:
        raise RuntimeError("disk full")


class _Recorder:
    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def warning(self, event: str, **kw: Any) -> None:
        self.calls.append((event, kw))


class _TagEnricher:
    def __init__(self, name: str, value: Any) -> None:
        self.name = name
        self.value = value

    def enrich(self, event: LogEvent, property_factory: Any) -> None:
        event.add_property_if_absent(property_factory.create_property(self.name, self.value))


class TestLogEvent:
    def test_add_property_if_absent_keeps_first(self) -> None:
        event = _event()
        event.add_property_if_absent(LogEventProperty("A", ScalarValue(1)))
        event.add_property_if_absent(LogEventProperty("A", ScalarValue(2)))
        assert event.properties["A"] == ScalarValue(1)

    def test_add_or_update_property_overwrites(self) -> None:
        event = _event()
        event.add_property_if_absent(LogEventProperty("A", ScalarValue(1)))
        event.add_or_update_property(LogEventProperty("A", ScalarValue(2)))
        assert event.properties["A"] == ScalarValue(2)

    def test_properties_view_is_read_only(self) -> None:
        event = _event()
        with pytest.raises(TypeError):
            event.properties["A"] = ScalarValue(1)  # type: ignore[index]

    def test_render_message(self) -> None:
        event = LogEvent(
            FakeClock().now(),
            LogEventLevel.INFORMATION,
            None,
            _parser.parse("Hello, {Recipient}"),
            [LogEventProperty("Recipient", ScalarValue("World"))],
        )
        assert event.render_message() == 'Hello, "World"'

    def test_empty_property_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            LogEventProperty("", ScalarValue(1))


class TestEventLogger:
    def test_is_enabled_respects_minimum_level(self) -> None:
        logger = EventLogger(minimum_level=LogEventLevel.WARNING)
        assert not logger.is_enabled(LogEventLevel.INFORMATION)
        assert logger.is_enabled(LogEventLevel.WARNING)
        assert logger.is_enabled(LogEventLevel.FATAL)

    def test_write_emits_to_every_sink(self) -> None:
        a, b = InMemorySink(), InMemorySink()
        EventLogger([a, b]).write(_event())
        assert len(a.writes) == 1
        assert len(b.writes) == 1

    def test_write_drops_disabled_events(self) -> None:
        sink = InMemorySink()
        EventLogger([sink], minimum_level=LogEventLevel.ERROR).write(_event(LogEventLevel.WARNING))
        assert sink.writes == []

    def test_for_context_attaches_property(self) -> None:
        sink = InMemorySink()
        EventLogger([sink]).for_context("Tenant", "acme").write(_event())
        assert sink.writes[0].properties["Tenant"] == ScalarValue("acme")

    def test_for_context_first_binding_wins(self) -> None:
        sink = InMemorySink()
        logger = EventLogger([sink]).for_context("Key", "first").for_context("Key", "second")
        logger.write(_event())
        assert sink.writes[0].properties["Key"] == ScalarValue("first")

    def test_for_context_does_not_mutate_parent(self) -> None:
        sink = InMemorySink()
        parent = EventLogger([sink])
        parent.for_context("Key", "value")
        parent.write(_event())
        assert "Key" not in sink.writes[0].properties

    def test_context_properties_precede_enrichers(self) -> None:
        sink = InMemorySink()
        logger = EventLogger([sink], enrichers=[_TagEnricher("Key", "enricher")])
        logger.for_context("Key", "context").write(_event())
        assert sink.writes[0].properties["Key"] == ScalarValue("context")

    def test_for_enrichers_appends(self) -> None:
        sink = InMemorySink()
        logger = EventLogger([sink]).for_enrichers(_TagEnricher("Added", True))
        logger.write(_event())
        assert sink.writes[0].properties["Added"] == ScalarValue(True)

    def test_failing_sink_does_not_propagate(self) -> None:
        sink = InMemorySink()
        EventLogger([_BrokenSink(), sink]).write(_event())
        assert len(sink.writes) == 1

    def test_failing_enricher_does_not_propagate(self) -> None:
        class _Broken:
            def enrich(self, event: LogEvent, property_factory: Any) -> None:
                raise KeyError("boom")

        sink = InMemorySink()
        EventLogger([sink], enrichers=[_Broken()]).write(_event())
        assert len(sink.writes) == 1

    def test_for_context_ignores_empty_name(self) -> None:
        logger = EventLogger()
        assert logger.for_context("", 1) is logger

    def test_failure_reported_with_error_fields(self, monkeypatch: pytest.MonkeyPatch) -> None:
        class _Rejecting:
            def emit(self, event: LogEvent) -> None:
                raise ApplicationError("queue closed", code="sink_closed")

        reports = _Recorder()
        monkeypatch.setattr(event_logger_module, "selflog", reports)
        EventLogger([_Rejecting(), _BrokenSink()]).write(_event())

        (first, second) = reports.calls
        assert first[0] == "sink_failed"
        assert first[1]["sink"] == "_Rejecting"
        assert first[1]["error"]["code"] == "sink_closed"
        assert second[1]["error"] == repr(RuntimeError("disk full"))

    def test_clock_is_shared_with_derived_loggers(self) -> None:
        clock = FakeClock()
        logger = EventLogger(clock=clock)
        assert logger.for_context("A", 1).clock is clock


class TestLogHolder:
    def test_default_logger_is_silent(self) -> None:
        assert isinstance(Log.logger, EventLogger)
        Log.logger.write(_event())

    def test_set_and_reset(self) -> None:
        custom = EventLogger()
        Log.set_logger(custom)
        assert Log.logger is custom
        Log.reset()
        assert Log.logger is not custom


class TestParseLevel:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("verbose", LogEventLevel.VERBOSE),
            ("trace", LogEventLevel.VERBOSE),
            ("Debug", LogEventLevel.DEBUG),
            ("info", LogEventLevel.INFORMATION),
            ("INFORMATION", LogEventLevel.INFORMATION),
            ("warn", LogEventLevel.WARNING),
            ("error", LogEventLevel.ERROR),
            ("critical", LogEventLevel.FATAL),
            (" fatal ", LogEventLevel.FATAL),
        ],
    )
    def test_known_names(self, name: str, expected: LogEventLevel) -> None:
        assert parse_level(name) is expected

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(ValueError):
            parse_level("loud")
