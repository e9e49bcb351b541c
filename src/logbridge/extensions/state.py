"""Extensions – log state shapes and the host's formatted-values state.

State handed to :meth:`BridgeLogger.log` is classified once, at the
boundary, into one of:

* :class:`Structured` – ordered ``(name, value)`` pairs: a mapping, a
  :class:`~logbridge.extensions.abstractions.LogValues`, or a list/tuple/
  iterator of 2-tuples with string keys;
* :class:`Scalar` – any other non-``None`` value;
* :data:`ABSENT` – ``None``.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Mapping
from typing import Any, Iterable, Union

from logbridge.events.template import Destructuring, MessageTemplateParser, PropertyToken
from logbridge.extensions.abstractions import ORIGINAL_FORMAT, LogValues


@dataclasses.dataclass(frozen=True, slots=True)
class Structured:
    pairs: tuple[tuple[str, Any], ...]


@dataclasses.dataclass(frozen=True, slots=True)
class Scalar:
    value: Any


@dataclasses.dataclass(frozen=True, slots=True)
class Absent:
    pass


ABSENT = Absent()

StateShape = Union[Structured, Scalar, Absent]


def _is_pairs(items: Iterable[Any]) -> bool:
    return all(isinstance(p, tuple) and len(p) == 2 and isinstance(p[0], str) for p in items)


def classify_state(state: Any) -> StateShape:
    if state is None:
        return ABSENT
    if isinstance(state, (str, bytes)):
        return Scalar(state)
    if isinstance(state, LogValues):
        return Structured(tuple(state.get_values()))
    if isinstance(state, Mapping):
        return Structured(tuple((str(k), v) for k, v in state.items()))
    if isinstance(state, (list, tuple)) and _is_pairs(state):
        return Structured(tuple(state))
    if isinstance(state, Iterator):
        items = tuple(state)
        return Structured(items) if _is_pairs(items) else Scalar(items)
    return Scalar(state)


_CONTAINERS = (dict, list, tuple, set, frozenset)


def is_generic_type(tp: type) -> bool:
    """True for container types and classes that declare type parameters.

    ``dict``, ``list`` and their subclasses count, as do ``Generic[T]``
    subclasses left unparameterised and iterators.  A plain class that
    merely implements :class:`LogValues` does not.
    """
    if issubclass(tp, _CONTAINERS) or issubclass(tp, Iterator):
        return True
    return bool(getattr(tp, "__parameters__", ()))


def split_sigil(key: str) -> tuple[str, bool]:
    """Strip a leading ``@`` from a state key; report whether it was there."""
    if key.startswith("@"):
        return key[1:], True
    return key, False


_parser = MessageTemplateParser()


class FormattedLogValues:
    """Message template plus positional arguments, as structured state.

    Each distinct hole name in *message* binds the next argument; a name
    that repeats reuses its argument.  A hole written ``{@Name}`` yields the
    key ``@Name`` so the argument is destructured, and ``{$Name}`` yields
    the argument as a string::

        state = FormattedLogValues("Hello, {Recipient}", "World")
        list(state.get_values())
        # [("Recipient", "World"), ("{OriginalFormat}", "Hello, {Recipient}")]
        str(state)
        # "Hello, World"
    """

    NULL_MESSAGE = "[null]"

    def __init__(self, message: str | None, *args: Any) -> None:
        self._message = message if message is not None else self.NULL_MESSAGE
        self._args = args
        names: dict[str, int] = {}
        sigils: dict[str, Destructuring] = {}
        if args:
            for token in _parser.parse(self._message).property_tokens:
                if token.name not in names:
                    names[token.name] = len(names)
                    sigils[token.name] = token.destructuring
        self._names = names
        self._sigils = sigils

    @property
    def message(self) -> str:
        return self._message

    def get_values(self) -> Iterator[tuple[str, Any]]:
        for name, index in self._names.items():
            if index >= len(self._args):
                continue
            arg = self._args[index]
            match self._sigils[name]:
                case Destructuring.DESTRUCTURE:
                    yield "@" + name, arg
                case Destructuring.STRINGIFY:
                    yield name, "(null)" if arg is None else str(arg)
                case _:
                    yield name, arg
        yield ORIGINAL_FORMAT, self._message

    def __str__(self) -> str:
        if not self._args:
            return self._message
        parts: list[str] = []
        for token in _parser.parse(self._message).tokens:
            if not isinstance(token, PropertyToken):
                parts.append(token.text)
                continue
            index = self._names[token.name]
            if index >= len(self._args):
                parts.append(token.raw)
            else:
                parts.append(_format_arg(self._args[index], token))
        return "".join(parts)

    def __repr__(self) -> str:
        return f"FormattedLogValues({self._message!r}, *{self._args!r})"


def _format_arg(arg: Any, token: PropertyToken) -> str:
    if arg is None:
        text = "(null)"
    elif token.format and token.format != "l":
        try:
            text = format(arg, token.format)
        except (TypeError, ValueError):
            text = str(arg)
    else:
        text = str(arg)
    return token.alignment.apply(text) if token.alignment else text


__all__ = [
    "ABSENT",
    "Absent",
    "FormattedLogValues",
    "Scalar",
    "StateShape",
    "Structured",
    "classify_state",
    "is_generic_type",
    "split_sigil",
]
