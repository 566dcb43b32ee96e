"""Syntax tree node definitions for yall."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

_INITIATORS = frozenset("{[(")


class ExpressionKind(Enum):
    BLOCK = "{"
    LIST = "["
    ITEM = "("
    NULL = ""  # bare comment where an expression was expected

    @classmethod
    def from_initiator(cls, ch: str | None) -> ExpressionKind | None:
        """Map an opening bracket to its kind, or None if it isn't one."""
        if ch is None or ch not in _INITIATORS:
            return None
        return cls(ch)

    @property
    def terminator(self) -> str | None:
        return _TERMINATORS.get(self)


_TERMINATORS: dict[ExpressionKind, str] = {
    ExpressionKind.BLOCK: "}",
    ExpressionKind.LIST: "]",
    ExpressionKind.ITEM: ")",
}

TERMINATORS = frozenset(_TERMINATORS.values())


# ── Phrases ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class Identifier:
    text: str


@dataclass(frozen=True)
class Text:
    content: str  # escapes kept verbatim


@dataclass(frozen=True)
class Number:
    digits: str


@dataclass(frozen=True)
class Comment:
    body: str


@dataclass(frozen=True)
class Label:
    name: str


@dataclass(frozen=True)
class Expression:
    kind: ExpressionKind
    values: tuple[Phrase, ...] = ()

    @classmethod
    def null(cls, comment: Comment) -> Expression:
        return cls(ExpressionKind.NULL, (comment,))


Phrase = Union[Expression, Identifier, Text, Number, Comment, Label]

Program = list[Expression]
