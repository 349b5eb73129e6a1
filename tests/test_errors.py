"""Tests for parse errors and their messages."""

import pytest

from semiconf import (
    ConfigError,
    ExpectedLiteralNotFound,
    IdentifierFirstCharNotAlphabetic,
    NoValueFound,
    ParseError,
    PrematureEndOfInput,
    UnknownEscapedSymbol,
    parse,
)
from semiconf.errors import locate


# ---------------------------------------------------------------------------
# Error kinds
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("cls", [
    IdentifierFirstCharNotAlphabetic,
    PrematureEndOfInput,
    NoValueFound,
])
def test_error_kinds_are_parse_errors(cls):
    e = cls(3)
    assert isinstance(e, ParseError)
    assert isinstance(e, ConfigError)
    assert isinstance(e, SyntaxError)
    assert e.offset == 3

def test_expected_literal_not_found():
    e = ExpectedLiteralNotFound(5, "=")
    assert e.expected == "="
    assert e.msg == "Expected '='"
    assert str(e) == "Expected '='"

def test_unknown_escaped_symbol():
    e = UnknownEscapedSymbol(2, "n")
    assert e.char == "n"
    assert e.msg == "Unknown escape sequence: '\\n'"

def test_error_repr():
    assert repr(NoValueFound(4)) == (
        "NoValueFound(offset=4, msg='Expected a string, list or object')"
    )


# ---------------------------------------------------------------------------
# locate
# ---------------------------------------------------------------------------

def test_locate_first_line():
    assert locate("abc", 0) == (1, 1)
    assert locate("abc", 2) == (1, 3)

def test_locate_later_line():
    assert locate("a\nbc", 3) == (2, 2)

def test_locate_counts_bytes():
    assert locate("ß\nßx", 5) == (2, 2)

def test_locate_accepts_bytes():
    assert locate("ß\nßx".encode(), 5) == (2, 2)

def test_error_locate():
    assert NoValueFound(9).locate("a='b';\nc=@") == (2, 3)


# ---------------------------------------------------------------------------
# highlight
# ---------------------------------------------------------------------------

def test_highlight():
    text = "key=@"
    with pytest.raises(ParseError) as excinfo:
        parse(text)
    assert excinfo.value.highlight(text) == (
        "Line 1, column 5: Expected a string, list or object\n"
        "  key=@\n"
        "      ^"
    )

def test_highlight_indented_line():
    text = "\n   key = @"
    with pytest.raises(ParseError) as excinfo:
        parse(text)
    assert excinfo.value.offset == 10
    assert excinfo.value.highlight(text) == (
        "Line 2, column 10: Expected a string, list or object\n"
        "  key = @\n"
        "        ^"
    )

def test_highlight_end_of_input():
    text = "key"
    with pytest.raises(ParseError) as excinfo:
        parse(text)
    assert excinfo.value.highlight(text, indent=0) == (
        "Line 1, column 4: Expected '='\n"
        "key\n"
        "   ^"
    )

def test_highlight_with_filename():
    e = NoValueFound(4)
    e.filename = "app.conf"
    assert e.highlight("key=@").startswith("File app.conf, Line 1, column 5: ")

def test_error_leader():
    e = PrematureEndOfInput(0)
    assert e.error_leader(3) == "Line 3: "
    assert e.error_leader(3, 7) == "Line 3, column 7: "
