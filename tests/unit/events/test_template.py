"""Unit tests for message template parsing and rendering."""

from __future__ import annotations

import pytest

from logbridge.events import (
    MessageTemplateParser,
    PropertyToken,
    ScalarValue,
    TextToken,
)
from logbridge.events.template import Alignment, Destructuring


@pytest.fixture
def parser() -> MessageTemplateParser:
    return MessageTemplateParser()


class TestParse:
    def test_plain_text_is_single_text_token(self, parser: MessageTemplateParser) -> None:
        template = parser.parse("This is a test")
        assert template.tokens == (TextToken("This is a test"),)

    def test_named_property(self, parser: MessageTemplateParser) -> None:
        template = parser.parse("Hello, {Recipient}")
        assert template.tokens[0] == TextToken("Hello, ")
        token = template.tokens[1]
        assert isinstance(token, PropertyToken)
        assert token.name == "Recipient"
        assert token.raw == "{Recipient}"
        assert token.format is None

    def test_format_and_alignment(self, parser: MessageTemplateParser) -> None:
        (token,) = parser.parse("{Elapsed,-8:0.00}").tokens
        assert isinstance(token, PropertyToken)
        assert token.name == "Elapsed"
        assert token.format == "0.00"
        assert token.alignment == Alignment(8, left=True)

    def test_literal_format(self, parser: MessageTemplateParser) -> None:
        (token,) = parser.parse("{State:l}").tokens
        assert isinstance(token, PropertyToken)
        assert token.format == "l"

    def test_destructuring_sigils(self, parser: MessageTemplateParser) -> None:
        at, _, dollar = parser.parse("{@Order} {$Order}").tokens
        assert isinstance(at, PropertyToken) and isinstance(dollar, PropertyToken)
        assert at.destructuring is Destructuring.DESTRUCTURE
        assert dollar.destructuring is Destructuring.STRINGIFY
        assert at.name == dollar.name == "Order"

    def test_escaped_braces_are_text(self, parser: MessageTemplateParser) -> None:
        template = parser.parse("{{not a hole}}")
        assert template.tokens == (TextToken("{not a hole}"),)

    def test_invalid_hole_kept_as_text(self, parser: MessageTemplateParser) -> None:
        template = parser.parse("bad {hole name} here")
        assert template.property_tokens == ()
        assert template.render({}) == "bad {hole name} here"

    def test_unclosed_brace_kept_as_text(self, parser: MessageTemplateParser) -> None:
        template = parser.parse("open {Brace")
        assert template.property_tokens == ()
        assert template.render({}) == "open {Brace"

    def test_positional_hole(self, parser: MessageTemplateParser) -> None:
        (token,) = parser.parse("{0}").tokens
        assert isinstance(token, PropertyToken)
        assert token.name == "0"

    def test_text_is_preserved_verbatim(self, parser: MessageTemplateParser) -> None:
        assert parser.parse("Hello, {Recipient}").text == "Hello, {Recipient}"

    def test_results_are_cached(self, parser: MessageTemplateParser) -> None:
        assert parser.parse("{A} and {B}") is parser.parse("{A} and {B}")


class TestRender:
    def test_string_properties_are_quoted(self, parser: MessageTemplateParser) -> None:
        template = parser.parse("Hello, {Recipient}")
        assert template.render({"Recipient": ScalarValue("World")}) == 'Hello, "World"'

    def test_literal_format_drops_quotes(self, parser: MessageTemplateParser) -> None:
        template = parser.parse("{State:l}")
        assert template.render({"State": ScalarValue("This is a test")}) == "This is a test"

    def test_numeric_format_spec(self, parser: MessageTemplateParser) -> None:
        template = parser.parse("took {Elapsed:.2f} ms")
        assert template.render({"Elapsed": ScalarValue(3.14159)}) == "took 3.14 ms"

    def test_missing_property_renders_raw_hole(self, parser: MessageTemplateParser) -> None:
        template = parser.parse("Hello, {Recipient}")
        assert template.render({}) == "Hello, {Recipient}"

    def test_alignment_pads(self, parser: MessageTemplateParser) -> None:
        template = parser.parse("[{Count,4}]")
        assert template.render({"Count": ScalarValue(7)}) == "[   7]"
