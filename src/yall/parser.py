"""Parser for yall.

Program -> Expression -> Phrase -> (nested) Expression. The whole source
is parsed in one pass; the first syntax error aborts the parse.

Nested brackets are tracked on an explicit stack of open expressions
rather than the Python call stack, so nesting depth is bounded only by
memory.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from yall.cursor import Cursor
from yall.errors import ErrorKind, ParseError
from yall.lexer import Lexer, is_ascii_alpha, is_ascii_digit, is_operator_char
from yall.nodes import TERMINATORS, Expression, ExpressionKind, Phrase, Program
from yall.source import Position


@dataclass
class _OpenExpression:
    kind: ExpressionKind
    opened_at: Position
    values: list[Phrase] = field(default_factory=list)


class Parser:
    """Parses yall source text into a list of top-level expressions."""

    def __init__(self, source: str, filename: str = "<stdin>") -> None:
        self.cursor = Cursor(source)
        self.filename = filename
        self.lexer = Lexer(self.cursor, filename)

    def parse(self) -> Program:
        program: Program = []
        self.lexer.skip_whitespace()
        while not self.cursor.at_end:
            program.append(self.parse_expression())
            self.lexer.skip_whitespace()
        return program

    # ── Expressions ──────────────────────────────────────────────

    def parse_expression(self) -> Expression:
        self.lexer.skip_whitespace()

        if self.cursor.peek() == ";":
            return Expression.null(self.lexer.lex_comment())

        stack = [self._open()]
        while True:
            top = stack[-1]
            if self._phrase_follows():
                if self.cursor.peek() in "{[(":
                    stack.append(self._open())
                else:
                    top.values.append(self.parse_phrase())
                continue

            expr = self._close(top)
            stack.pop()
            if not stack:
                return expr
            self._skip_annotation()
            stack[-1].values.append(expr)

    def _open(self) -> _OpenExpression:
        opened_at = self.cursor.position
        initiator = self.cursor.peek()
        kind = ExpressionKind.from_initiator(initiator)
        if kind is None:
            if initiator is None:
                raise self.lexer.error(
                    ErrorKind.UNEXPECTED_END_OF_INPUT, detail="expected an expression",
                )
            raise self.lexer.error(
                ErrorKind.UNEXPECTED_CHARACTER, found=initiator,
                detail="expected an expression",
            )
        self.cursor.next()
        return _OpenExpression(kind, opened_at)

    def _close(self, open_expr: _OpenExpression) -> Expression:
        kind = open_expr.kind
        found_at = self.cursor.position
        found = self.cursor.next()
        if found != kind.terminator:
            raise ParseError(
                ErrorKind.UNMATCHED_TERMINATOR, found_at,
                filename=self.filename, found=found, expected=kind.terminator,
                opened_at=open_expr.opened_at,
            )
        return Expression(kind, tuple(open_expr.values))

    def _phrase_follows(self) -> bool:
        """True unless the next significant character closes the expression."""
        self.lexer.skip_whitespace()
        ch = self.cursor.peek()
        return ch is not None and ch not in TERMINATORS

    def _skip_annotation(self) -> None:
        # Type annotations are validated and then dropped.
        if self.lexer.starts_annotation():
            self.lexer.lex_annotation()

    # ── Phrases ──────────────────────────────────────────────────

    def parse_phrase(self) -> Phrase:
        self.lexer.skip_whitespace()
        ch = self.cursor.peek()

        phrase: Phrase
        if ch is None:
            raise self.lexer.error(ErrorKind.UNEXPECTED_END_OF_INPUT)
        elif ch in "{[(":
            phrase = self.parse_expression()
        elif ch == '"':
            phrase = self.lexer.lex_text()
        elif ch == ";":
            phrase = self.lexer.lex_comment()
        elif self.lexer.starts_label():
            phrase = self.lexer.lex_label()
        elif is_ascii_digit(ch):
            phrase = self.lexer.lex_number()
        elif is_ascii_alpha(ch):
            phrase = self.lexer.lex_text_identifier()
        elif is_operator_char(ch):
            phrase = self.lexer.lex_operator_identifier()
        else:
            raise self.lexer.error(ErrorKind.UNEXPECTED_CHARACTER, found=ch)

        self._skip_annotation()
        return phrase


def parse_program(source: str, filename: str = "<stdin>") -> Program:
    """Parse a complete source text. Raises ParseError on the first error."""
    return Parser(source, filename).parse()
