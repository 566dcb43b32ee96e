"""Source positions and span tracking for diagnostics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A 1-based line/column location in source text."""

    line: int = 1
    column: int = 1

    def advance(self, ch: str) -> Position:
        """Return the position after consuming ``ch``."""
        if ch == "\n":
            return Position(self.line + 1, 1)
        return Position(self.line, self.column + 1)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Span:
    """A range within a source file."""

    file: str
    start_line: int
    start_col: int
    end_line: int
    end_col: int

    @classmethod
    def at(cls, file: str, position: Position) -> Span:
        """A single-character span at ``position``."""
        return cls(file, position.line, position.column, position.line, position.column)

    def __str__(self) -> str:
        return f"{self.file}:{self.start_line}:{self.start_col}"

