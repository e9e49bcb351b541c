"""Events – message templates and their parser.

A message template is literal text with named holes::

    "Hello, {Recipient}"
    "Processed {@Order} in {Elapsed:0.000} ms"
    "{Name,-10} | {Count,5}"

Holes use ``{Name[,alignment][:format]}``.  ``{{`` and ``}}`` escape
literal braces.  A leading ``@`` asks for destructuring and a leading ``$``
for stringification.  Anything that does not parse as a hole is kept as
literal text, so parsing never fails.
"""
from __future__ import annotations

import dataclasses
import enum
import functools
from collections.abc import Mapping
from typing import Union

from logbridge.events.values import LogEventPropertyValue


class Destructuring(enum.Enum):
    DEFAULT = ""
    DESTRUCTURE = "@"
    STRINGIFY = "$"


@dataclasses.dataclass(frozen=True, slots=True)
class Alignment:
    width: int
    left: bool = False

    def apply(self, text: str) -> str:
        return text.ljust(self.width) if self.left else text.rjust(self.width)


@dataclasses.dataclass(frozen=True, slots=True)
class TextToken:
    text: str

    def render(self, properties: Mapping[str, LogEventPropertyValue]) -> str:
        return self.text


@dataclasses.dataclass(frozen=True, slots=True)
class PropertyToken:
    """A named hole; ``raw`` keeps the source text for unbound rendering."""

    name: str
    raw: str
    format: str | None = None
    alignment: Alignment | None = None
    destructuring: Destructuring = Destructuring.DEFAULT

    def render(self, properties: Mapping[str, LogEventPropertyValue]) -> str:
        value = properties.get(self.name)
        if value is None:
            return self.raw
        text = value.render(self.format)
        return self.alignment.apply(text) if self.alignment else text


Token = Union[TextToken, PropertyToken]


@dataclasses.dataclass(frozen=True, slots=True)
class MessageTemplate:
    text: str
    tokens: tuple[Token, ...]

    @property
    def property_tokens(self) -> tuple[PropertyToken, ...]:
        return tuple(t for t in self.tokens if isinstance(t, PropertyToken))

    def render(self, properties: Mapping[str, LogEventPropertyValue]) -> str:
        return "".join(token.render(properties) for token in self.tokens)

    def __str__(self) -> str:
        return self.text


class MessageTemplateParser:
    """Parse template text into tokens.

    Results are cached per parser instance; templates are usually string
    literals repeated across calls.
    """

    def __init__(self, cache_size: int = 1000) -> None:
        self._cached = functools.lru_cache(maxsize=cache_size)(_parse_template)

    def parse(self, text: str) -> MessageTemplate:
        return self._cached(text)


def _parse_template(text: str) -> MessageTemplate:
    tokens: list[Token] = []
    literal: list[str] = []
    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        if ch == "{":
            if i + 1 < n and text[i + 1] == "{":
                literal.append("{")
                i += 2
                continue
            end = text.find("}", i + 1)
            nested = text.find("{", i + 1)
            if end == -1 or (nested != -1 and nested < end):
                stop = n if end == -1 else nested
                literal.append(text[i:stop])
                i = stop
                continue
            raw = text[i : end + 1]
            token = _parse_property(raw)
            if token is None:
                literal.append(raw)
            else:
                if literal:
                    tokens.append(TextToken("".join(literal)))
                    literal = []
                tokens.append(token)
            i = end + 1
        elif ch == "}":
            literal.append("}")
            i += 2 if i + 1 < n and text[i + 1] == "}" else 1
        else:
            literal.append(ch)
            i += 1
    if literal:
        tokens.append(TextToken("".join(literal)))
    return MessageTemplate(text, tuple(tokens))


def _is_name(name: str) -> bool:
    return bool(name) and all(c.isalnum() or c == "_" for c in name)


def _parse_property(raw: str) -> PropertyToken | None:
    body = raw[1:-1]
    destructuring = Destructuring.DEFAULT
    if body[:1] in ("@", "$"):
        destructuring = Destructuring(body[0])
        body = body[1:]

    fmt: str | None = None
    if ":" in body:
        body, fmt = body.split(":", 1)
        if not fmt:
            return None

    alignment: Alignment | None = None
    if "," in body:
        body, align = body.split(",", 1)
        left = align.startswith("-")
        digits = align[1:] if left else align
        if not digits.isdigit():
            return None
        alignment = Alignment(int(digits), left)

    if not _is_name(body):
        return None
    return PropertyToken(body, raw, fmt, alignment, destructuring)


__all__ = [
    "Alignment",
    "Destructuring",
    "MessageTemplate",
    "MessageTemplateParser",
    "PropertyToken",
    "TextToken",
    "Token",
]
