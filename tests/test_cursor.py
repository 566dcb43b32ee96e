"""Tests for the character cursor."""

from __future__ import annotations

from yall.cursor import Cursor
from yall.source import Position


class TestCursor:
    def test_empty(self):
        cursor = Cursor("")
        assert cursor.peek() is None
        assert cursor.next() is None
        assert cursor.at_end

    def test_peek_does_not_advance(self):
        cursor = Cursor("ab")
        assert cursor.peek() == "a"
        assert cursor.peek() == "a"
        assert cursor.position == Position(1, 1)

    def test_peek_offset(self):
        cursor = Cursor("ab")
        assert cursor.peek(1) == "b"
        assert cursor.peek(2) is None

    def test_next_advances_column(self):
        cursor = Cursor("ab")
        assert cursor.next() == "a"
        assert cursor.position == Position(1, 2)
        assert cursor.next() == "b"
        assert cursor.position == Position(1, 3)
        assert cursor.at_end

    def test_newline_resets_column(self):
        cursor = Cursor("a\nb")
        cursor.next()
        cursor.next()
        assert cursor.position == Position(2, 1)
        cursor.next()
        assert cursor.position == Position(2, 2)

    def test_next_at_end_keeps_position(self):
        cursor = Cursor("a")
        cursor.next()
        cursor.next()
        assert cursor.position == Position(1, 2)


class TestConsumeWhile:
    def test_stops_before_failing_char(self):
        cursor = Cursor("abc123")
        assert cursor.consume_while(str.isalpha) == "abc"
        assert cursor.peek() == "1"

    def test_runs_to_end(self):
        cursor = Cursor("123")
        assert cursor.consume_while(str.isdigit) == "123"
        assert cursor.at_end

    def test_no_match_consumes_nothing(self):
        cursor = Cursor("x")
        assert cursor.consume_while(str.isdigit) == ""
        assert cursor.position == Position(1, 1)

    def test_tracks_lines(self):
        cursor = Cursor("  \n \nx")
        cursor.consume_while(str.isspace)
        assert cursor.position == Position(3, 1)
