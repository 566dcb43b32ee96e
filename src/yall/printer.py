"""Readable tree dump for ``yall -p``."""

from __future__ import annotations

from yall.nodes import Comment, Expression, Identifier, Label, Number, Phrase, Program, Text


def dump_program(program: Program) -> str:
    """Render a parsed program as an indented tree, one node per line."""
    lines = ["Program" if program else "Program []"]
    # Explicit stack keeps deep nesting off the Python call stack.
    pending: list[tuple[Phrase, int]] = [(expr, 1) for expr in reversed(program)]
    while pending:
        node, depth = pending.pop()
        lines.append("  " * depth + _describe(node))
        if isinstance(node, Expression):
            pending.extend((value, depth + 1) for value in reversed(node.values))
    return "\n".join(lines)


def _describe(node: Phrase) -> str:
    match node:
        case Expression(kind=kind, values=values):
            suffix = "" if values else " []"
            return f"Expression {kind.name}{suffix}"
        case Identifier(text=text):
            return f"Identifier {text!r}"
        case Text(content=content):
            return f"Text {content!r}"
        case Number(digits=digits):
            return f"Number {digits!r}"
        case Comment(body=body):
            return f"Comment {body!r}"
        case Label(name=name):
            return f"Label {name!r}"
