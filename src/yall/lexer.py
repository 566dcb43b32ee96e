"""Leaf phrase rules for the yall tokenizer.

Each ``lex_*`` method consumes exactly one lexical unit starting at the
cursor. Nested expressions are handled by the parser, which owns the
dispatch between these rules.
"""

from __future__ import annotations

from yall.cursor import Cursor
from yall.errors import ErrorKind, ParseError
from yall.nodes import Comment, Identifier, Label, Number, Text

OPERATOR_CHARACTERS = frozenset("*+-/<>=!$|?^~")


def is_text_identifier_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == "_")


def is_operator_char(ch: str) -> bool:
    return ch in OPERATOR_CHARACTERS


def is_ascii_digit(ch: str) -> bool:
    return ch.isascii() and ch.isdigit()


def is_ascii_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


class Lexer:
    """Consumes leaf phrases from a cursor."""

    def __init__(self, cursor: Cursor, filename: str = "<stdin>") -> None:
        self.cursor = cursor
        self.filename = filename

    def error(self, kind: ErrorKind, **details: object) -> ParseError:
        return ParseError(kind, self.cursor.position, filename=self.filename, **details)

    def _expect(self, ch: str) -> None:
        found = self.cursor.peek()
        if found != ch:
            kind = (ErrorKind.UNEXPECTED_END_OF_INPUT if found is None
                    else ErrorKind.UNEXPECTED_CHARACTER)
            raise self.error(kind, found=found, detail=f"expected {ch!r}")
        self.cursor.next()

    # ── Lookahead ────────────────────────────────────────────────

    def skip_whitespace(self) -> None:
        self.cursor.consume_while(str.isspace)

    def starts_label(self) -> bool:
        nxt = self.cursor.peek(1)
        return self.cursor.peek() == ":" and nxt is not None and nxt.isalnum()

    def starts_annotation(self) -> bool:
        return self.cursor.peek() == ":" and self.cursor.peek(1) == ":"

    # ── Leaf phrases ─────────────────────────────────────────────

    def lex_text(self) -> Text:
        """A double-quoted string; backslash escapes are kept verbatim."""
        start = self.cursor.position
        self._expect('"')
        text = []
        escaped = False
        while True:
            ch = self.cursor.next()
            if ch is None:
                raise self.error(
                    ErrorKind.UNEXPECTED_END_OF_INPUT, detail="unterminated string",
                    notes=(f"the string starts at {start}",),
                )
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                return Text("".join(text))
            text.append(ch)

    def lex_comment(self) -> Comment:
        self._expect(";")
        return Comment(self.cursor.consume_while(lambda c: c != "\n"))

    def lex_number(self) -> Number:
        seen_point = False

        def accept(ch: str) -> bool:
            nonlocal seen_point
            if ch == "." and not seen_point:
                seen_point = True
                return True
            return is_ascii_digit(ch)

        return Number(self.cursor.consume_while(accept))

    def lex_text_identifier(self) -> Identifier:
        return Identifier(self.cursor.consume_while(is_text_identifier_char))

    def lex_operator_identifier(self) -> Identifier:
        return Identifier(self.cursor.consume_while(is_operator_char))

    def lex_label(self) -> Label:
        self._expect(":")
        return Label(self.cursor.consume_while(str.isalnum))

    def lex_annotation(self) -> str:
        """Consume ``::Name`` and return ``Name``.

        Uses the plain identifier rule rather than full phrase parsing, so
        ``a::b::c`` is not an annotated annotation.
        """
        if not self.starts_annotation():
            raise self.error(
                ErrorKind.MALFORMED_ANNOTATION, found=self.cursor.peek(),
                detail="expected '::'",
            )
        self.cursor.next()
        self.cursor.next()
        first = self.cursor.peek()
        if first is None or not is_text_identifier_char(first):
            raise self.error(
                ErrorKind.MALFORMED_ANNOTATION, found=first,
                detail="expected a type name after '::'",
            )
        return self.lex_text_identifier().text
