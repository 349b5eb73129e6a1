"""Tests for cursors."""

from semiconf.cursor import Cursor


def test_cursor_defaults():
    c = Cursor("abc")
    assert c.pos == 0
    assert c.offset == 0
    assert c.rest == "abc"
    assert c.peek() == "a"
    assert not c.at_end()

def test_cursor_advance():
    c = Cursor("abc").advance(2)
    assert c.pos == 2
    assert c.offset == 2
    assert c.rest == "c"

def test_cursor_advance_counts_bytes():
    c = Cursor("aßc").advance(2)
    assert c.pos == 2
    assert c.offset == 3
    assert c.rest == "c"

def test_cursor_advance_stops_at_end():
    c = Cursor("ab").advance(5)
    assert c.pos == 2
    assert c.offset == 2
    assert c.at_end()
    assert c.peek() == ""
    assert c.rest == ""

def test_cursor_is_not_mutated():
    c = Cursor("abc")
    c.advance()
    assert c.pos == 0
    assert c.offset == 0

def test_cursor_startswith():
    c = Cursor("abc").advance()
    assert c.startswith("bc")
    assert not c.startswith("a")

def test_cursor_empty_text():
    c = Cursor("")
    assert c.at_end()
    assert c.peek() == ""
