"""Syntax errors and Rust-style colored diagnostic rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from yall.source import Position, Span


class Severity(Enum):
    ERROR = "error"


# ANSI color codes
_COLORS = {
    Severity.ERROR: "\033[1;31m",    # bold red
}
_BOLD = "\033[1m"
_BLUE = "\033[1;34m"
_RESET = "\033[0m"


@dataclass(frozen=True)
class DiagnosticLabel:
    """Points to a specific source location."""

    span: Span
    message: str
    style: str = "primary"  # "primary" or "secondary"


@dataclass(frozen=True)
class Suggestion:
    """A suggested fix."""

    message: str
    replacement: str


@dataclass
class Diagnostic:
    """A single diagnostic message with optional labels and suggestions."""

    severity: Severity
    code: str
    message: str
    labels: list[DiagnosticLabel] = field(default_factory=list)
    suggestions: list[Suggestion] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)


class ErrorKind(Enum):
    UNEXPECTED_END_OF_INPUT = "E100"
    UNEXPECTED_CHARACTER = "E101"
    UNMATCHED_TERMINATOR = "E102"
    MALFORMED_ANNOTATION = "E103"

    @property
    def code(self) -> str:
        return self.value


def _describe(ch: str | None) -> str:
    return "end of input" if ch is None else repr(ch)


class ParseError(Exception):
    """The first syntax error of a parse; aborts the whole program parse.

    ``found`` is the offending character (None at end of input) and
    ``expected`` the required terminator for unmatched brackets.
    """

    def __init__(
        self,
        kind: ErrorKind,
        position: Position,
        *,
        filename: str = "<stdin>",
        found: str | None = None,
        expected: str | None = None,
        detail: str = "",
        opened_at: Position | None = None,
        notes: tuple[str, ...] = (),
    ) -> None:
        self.kind = kind
        self.position = position
        self.filename = filename
        self.found = found
        self.expected = expected
        self.detail = detail
        self.opened_at = opened_at
        self.notes = notes
        super().__init__(f"{filename}:{position}: {self.message}")

    @property
    def message(self) -> str:
        match self.kind:
            case ErrorKind.UNEXPECTED_END_OF_INPUT:
                msg = "unexpected end of input"
            case ErrorKind.UNEXPECTED_CHARACTER:
                msg = f"unexpected character {_describe(self.found)}"
            case ErrorKind.UNMATCHED_TERMINATOR:
                msg = (
                    f"expected {self.expected!r} to terminate expression, "
                    f"found {_describe(self.found)}"
                )
            case ErrorKind.MALFORMED_ANNOTATION:
                msg = "malformed type annotation"
        if self.detail:
            msg = f"{msg}: {self.detail}"
        return msg

    def to_diagnostic(self) -> Diagnostic:
        labels = [DiagnosticLabel(span=Span.at(self.filename, self.position), message="")]
        suggestions: list[Suggestion] = []
        if self.opened_at is not None:
            labels.append(DiagnosticLabel(
                span=Span.at(self.filename, self.opened_at),
                message="expression opened here",
                style="secondary",
            ))
        if self.kind == ErrorKind.UNMATCHED_TERMINATOR and self.expected:
            suggestions.append(Suggestion(
                message="close the expression", replacement=self.expected,
            ))
        return Diagnostic(
            severity=Severity.ERROR,
            code=self.kind.code,
            message=self.message,
            labels=labels,
            suggestions=suggestions,
            notes=list(self.notes),
        )


class DiagnosticRenderer:
    """Renders diagnostics in Rust-style format with colors."""

    def __init__(self, *, color: bool = True) -> None:
        self.color = color
        self._file_cache: dict[str, list[str]] = {}

    def _c(self, code: str) -> str:
        return code if self.color else ""

    def add_source(self, filename: str, text: str) -> None:
        """Register in-memory source for a filename that may not exist on disk."""
        self._file_cache[filename] = text.splitlines()

    def _get_source_line(self, filename: str, line_num: int) -> str | None:
        """Load and cache source file, return the 1-indexed line."""
        if filename not in self._file_cache:
            try:
                path = Path(filename)
                if path.is_file():
                    self._file_cache[filename] = path.read_text().splitlines()
                else:
                    self._file_cache[filename] = []
            except OSError:
                self._file_cache[filename] = []
        lines = self._file_cache[filename]
        if 1 <= line_num <= len(lines):
            return lines[line_num - 1]
        return None

    def render(self, diag: Diagnostic) -> str:
        lines: list[str] = []
        sev = diag.severity
        color = _COLORS[sev]

        # Header: error[E101]: message
        lines.append(
            f"{self._c(color)}{sev.value}[{diag.code}]{self._c(_RESET)}"
            f"{self._c(_BOLD)}: {diag.message}{self._c(_RESET)}"
        )

        for label in diag.labels:
            span = label.span
            mark_color = color if label.style == "primary" else _BLUE
            if label.style == "primary":
                lines.append(f"  {self._c(_BLUE)}-->{self._c(_RESET)} {span}")
            gutter = f"{span.start_line:>4}"
            lines.append(f"  {self._c(_BLUE)}   |{self._c(_RESET)}")

            source_line = self._get_source_line(span.file, span.start_line)
            if source_line is not None:
                lines.append(
                    f"  {self._c(_BLUE)}{gutter} |{self._c(_RESET)} {source_line}"
                )

            caret_len = max(1, span.end_col - span.start_col + 1)
            padding = " " * (span.start_col - 1)
            marks = ("^" if label.style == "primary" else "-") * caret_len
            lines.append(
                f"  {self._c(_BLUE)}   |{self._c(_RESET)} "
                f"{padding}{self._c(mark_color)}{marks}{self._c(_RESET)}"
            )

            if label.message:
                lines.append(
                    f"  {self._c(_BLUE)}   |{self._c(_RESET)}   "
                    f"{self._c(mark_color)}{label.message}{self._c(_RESET)}"
                )

        for note in diag.notes:
            lines.append(f"  {self._c(_BLUE)}={self._c(_RESET)} note: {note}")

        for suggestion in diag.suggestions:
            lines.append(
                f"  {self._c(_BLUE)}try:{self._c(_RESET)} {suggestion.replacement}"
                f" ({suggestion.message})"
            )

        return "\n".join(lines)
