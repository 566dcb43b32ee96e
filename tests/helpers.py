"""Shared test helpers for the yall test suite."""

from __future__ import annotations

import pytest

from yall.errors import ErrorKind, ParseError
from yall.nodes import Expression, Phrase
from yall.parser import Parser, parse_program


def parse_one(source: str) -> Expression:
    """Parse source that must contain exactly one top-level expression."""
    program = parse_program(source, "<test>")
    assert len(program) == 1, program
    return program[0]


def phrase(source: str) -> Phrase:
    """Parse a single phrase from the start of source."""
    return Parser(source, "<test>").parse_phrase()


def parse_fails(source: str, kind: ErrorKind) -> ParseError:
    """Parse source, asserting it fails with the given error kind."""
    with pytest.raises(ParseError) as excinfo:
        parse_program(source, "<test>")
    assert excinfo.value.kind == kind, excinfo.value.message
    return excinfo.value
