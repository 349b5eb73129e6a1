'''
Lexical primitives.
These rules only look at characters, never at other rules.
'''

__all__ = (
    'escaped_char',
    'identifier',
    'literal',
    'lstrip_white_space',
    'single_quoted_string',
    'skip_white_space',
)


import re

import regex

from .constants import ESCAPE, QUOTE
from .cursor import Cursor
from .errors import (
    ExpectedLiteralNotFound,
    IdentifierFirstCharNotAlphabetic,
    PrematureEndOfInput,
    UnknownEscapedSymbol,
)
from ._types import Key, TokenValue


ESCAPABLE = (QUOTE, ESCAPE)

# str.isspace() also accepts U+001C to U+001F, which are not White_Space.
NOT_WHITE_SPACE = frozenset('\x1c\x1d\x1e\x1f')

# An Alphabetic code point, then any Alphabetic or Numeric ones, '-' or '_'.
_IDENTIFIER = regex.compile(r'\p{Alphabetic}[\p{Alphabetic}\p{N}_\-]*')

# Runs of string content that need no special handling:
_PLAIN_RUN = re.compile('[^' + re.escape(QUOTE + ESCAPE) + ']+')


def is_white_space(char: str) -> bool:
    return char.isspace() and char not in NOT_WHITE_SPACE


def lstrip_white_space(text: str) -> str:
    '''Remove leading whitespace as the parser sees it.'''
    start = 0
    while start < len(text) and is_white_space(text[start]):
        start += 1
    return text[start:]


def skip_white_space(cursor: Cursor) -> Cursor:
    '''
    Move past any whitespace. Never fails.

    :param cursor: Where to start skipping
    :type cursor: :class:`Cursor`
    '''
    text = cursor.text
    end = cursor.pos
    while end < len(text) and is_white_space(text[end]):
        end += 1
    return cursor.advance(end - cursor.pos)


def literal(cursor: Cursor, expected: TokenValue) -> tuple[Cursor, TokenValue]:
    '''
    Consume `expected` if the text continues with it.

    :param cursor: Where `expected` should begin
    :type cursor: :class:`Cursor`

    :param expected: The exact text to match
    :type expected: :class:`TokenValue`

    :raises: :exc:`ExpectedLiteralNotFound` at the offset of `cursor`
        when the text does not continue with `expected`
    '''
    if not cursor.startswith(expected):
        raise ExpectedLiteralNotFound(cursor.offset, expected)
    return cursor.advance(len(expected)), expected


def identifier(cursor: Cursor) -> tuple[Cursor, Key]:
    '''
    Consume a key name: an alphabetic character followed by any number
    of alphanumeric characters, hyphens and underscores.

    :param cursor: Where the identifier should begin
    :type cursor: :class:`Cursor`

    :raises: :exc:`PrematureEndOfInput` when there is no text left
    :raises: :exc:`IdentifierFirstCharNotAlphabetic` when the first
        character is not alphabetic
    '''
    if cursor.at_end():
        raise PrematureEndOfInput(cursor.offset)
    match = _IDENTIFIER.match(cursor.text, cursor.pos)
    if match is None:
        raise IdentifierFirstCharNotAlphabetic(cursor.offset)
    name = match.group()
    return cursor.advance(len(name)), name


def escaped_char(cursor: Cursor) -> tuple[Cursor, str]:
    '''
    Consume a backslash and the character it escapes.
    Return the escaped character itself.

    :param cursor: Positioned at the backslash
    :type cursor: :class:`Cursor`

    :raises: :exc:`PrematureEndOfInput` when the text ends after the
        backslash
    :raises: :exc:`UnknownEscapedSymbol` at the escaped character when
        it is neither a quote nor a backslash
    '''
    cursor, _ = literal(cursor, ESCAPE)
    char = cursor.peek()
    if not char:
        raise PrematureEndOfInput(cursor.offset)
    if char not in ESCAPABLE:
        raise UnknownEscapedSymbol(cursor.offset, char)
    return cursor.advance(), char


def single_quoted_string(cursor: Cursor) -> tuple[Cursor, str]:
    '''
    Consume a single-quoted string and return its decoded contents.

    :param cursor: Positioned at the opening quote
    :type cursor: :class:`Cursor`

    :raises: :exc:`ExpectedLiteralNotFound` when there is no opening
        quote
    :raises: :exc:`PrematureEndOfInput` at the end of the text when the
        closing quote is missing
    :raises: :exc:`UnknownEscapedSymbol` for invalid escape sequences
    '''
    cursor, _ = literal(cursor, QUOTE)
    chunks = []
    while True:
        run = _PLAIN_RUN.match(cursor.text, cursor.pos)
        if run is not None:
            chunks.append(run.group())
            cursor = cursor.advance(len(run.group()))

        char = cursor.peek()
        if not char:
            raise PrematureEndOfInput(cursor.offset)
        if char == QUOTE:
            return cursor.advance(), ''.join(chunks)

        # Only a backslash is left:
        cursor, char = escaped_char(cursor)
        chunks.append(char)
