"""Character cursor over yall source text."""

from __future__ import annotations

from collections.abc import Callable

from yall.source import Position


class Cursor:
    """Single-owner view of a source string with position tracking.

    Peeking never advances. Every consumed character moves ``position``
    forward; a newline starts the next line at column 1.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._position = Position()

    @property
    def position(self) -> Position:
        return self._position

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._source)

    def peek(self, offset: int = 0) -> str | None:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return None

    def next(self) -> str | None:
        if self._pos >= len(self._source):
            return None
        ch = self._source[self._pos]
        self._pos += 1
        self._position = self._position.advance(ch)
        return ch

    def consume_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume the leading run of characters satisfying ``predicate``."""
        text = []
        while self._pos < len(self._source) and predicate(self._source[self._pos]):
            text.append(self.next())
        return "".join(text)
