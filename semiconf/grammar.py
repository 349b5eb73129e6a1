'''
The value grammar and the entry point.

.. code::

    pairs      := ws (pair (ws ';' ws pair)* (ws ';')?)?
    pair       := identifier ws '=' ws value
    value      := string | list | object
    list       := '[' ws (value (ws ';' ws value)* (ws ';')?)? ws ']'
    object     := '(' ws pairs? ws ')'

Rules that recurse are generators. Instead of calling another rule they
yield ``(rule, cursor)`` to :func:`run_rule`, which runs it outside the
Python call stack and sends back its ``(cursor, output)`` result or
throws its :exc:`ParseError` in at the ``yield``.
'''

__all__ = (
    'parse',
    'parse_file',
    'parse_key_value_pair',
    'parse_key_value_pairs',
    'parse_list',
    'parse_object',
    'parse_value',
    'run_rule',
)


from os import PathLike
from typing import Any

from .constants import (
    ENCODING,
    EQUALS,
    L_BRACKET,
    L_PAREN,
    QUOTE,
    R_BRACKET,
    R_PAREN,
    SEPARATOR,
)
from .cursor import Cursor
from .errors import ExpectedLiteralNotFound, NoValueFound, ParseError
from .lexical import identifier, literal, single_quoted_string, skip_white_space
from .log import logger
from .values import ListValue, ObjectValue, StringValue, Value
from ._types import FileContents, Pair, PairList, Rule


def run_rule(rule: Rule, cursor: Cursor) -> tuple[Cursor, Any]:
    '''
    Run a recursive rule and every rule it calls using a stack.
    Credit to Dave Beazley (2014).

    :param rule: The generator function to run
    :type rule: :class:`Rule`

    :param cursor: Where the rule should start
    :type cursor: :class:`Cursor`

    :raises: :exc:`ParseError` when the outermost rule fails
    '''
    stack = [rule(cursor)]
    result = None
    error = None
    while stack:
        try:
            if error is not None:
                exc, error = error, None
                call = stack[-1].throw(exc)
            else:
                call = stack[-1].send(result)
        except StopIteration as e:
            stack.pop()
            result = e.value
        except ParseError as e:
            stack.pop()
            if not stack:
                raise
            # Let the calling rule decide what the failure means:
            error = e
        else:
            rule, cursor = call
            stack.append(rule(cursor))
            result = None
    return result


def _value(cursor: Cursor):
    start = cursor
    try:
        match cursor.peek():
            case c if c == QUOTE:
                cursor, text = single_quoted_string(cursor)
                return cursor, StringValue(text)
            case c if c == L_BRACKET:
                cursor, items = (yield (_list, cursor))
                return cursor, ListValue(items)
            case c if c == L_PAREN:
                cursor, pairs = (yield (_object, cursor))
                return cursor, ObjectValue(pairs)
    except ParseError as e:
        raise NoValueFound(start.offset) from e
    raise NoValueFound(start.offset)


def _list(cursor: Cursor):
    cursor, _ = literal(cursor, L_BRACKET)
    cursor = skip_white_space(cursor)

    try:
        cursor, first = (yield (_value, cursor))
    except ParseError:
        # Only an empty list can close here.
        logger.debug(f"Empty list at offset {cursor.offset}")
        cursor, _ = literal(cursor, R_BRACKET)
        return cursor, []

    items = [first]
    while True:
        before = cursor
        cursor = skip_white_space(cursor)
        try:
            cursor, _ = literal(cursor, SEPARATOR)
        except ExpectedLiteralNotFound:
            cursor = before
            break

        after_separator = cursor
        cursor = skip_white_space(cursor)
        try:
            cursor, item = (yield (_value, cursor))
        except ParseError:
            logger.debug(
                f"Trailing separator in list at offset {after_separator.offset}"
            )
            cursor = after_separator
            break
        items.append(item)

    cursor = skip_white_space(cursor)
    cursor, _ = literal(cursor, R_BRACKET)
    return cursor, items


def _object(cursor: Cursor):
    cursor, _ = literal(cursor, L_PAREN)
    cursor = skip_white_space(cursor)

    try:
        cursor, pairs = (yield (_key_value_pairs, cursor))
    except ParseError:
        # Only an empty object can close here.
        logger.debug(f"Empty object at offset {cursor.offset}")
        cursor, _ = literal(cursor, R_PAREN)
        return cursor, []

    cursor = skip_white_space(cursor)
    cursor, _ = literal(cursor, R_PAREN)
    return cursor, pairs


def _key_value_pair(cursor: Cursor):
    cursor, key = identifier(cursor)
    cursor = skip_white_space(cursor)
    cursor, _ = literal(cursor, EQUALS)
    cursor = skip_white_space(cursor)
    cursor, value = (yield (_value, cursor))
    return cursor, (key, value)


def _key_value_pairs(cursor: Cursor):
    cursor = skip_white_space(cursor)
    if cursor.at_end():
        return cursor, []

    cursor, pair = (yield (_key_value_pair, cursor))
    pairs = [pair]
    while True:
        # Whitespace after the last pair belongs to whatever comes next.
        before = cursor
        cursor = skip_white_space(cursor)
        try:
            cursor, _ = literal(cursor, SEPARATOR)
        except ExpectedLiteralNotFound:
            return before, pairs

        after_separator = cursor
        cursor = skip_white_space(cursor)
        try:
            cursor, pair = (yield (_key_value_pair, cursor))
        except ParseError:
            logger.debug(
                f"Trailing separator at offset {after_separator.offset}"
            )
            return after_separator, pairs
        pairs.append(pair)


def _as_cursor(cursor: Cursor | FileContents) -> Cursor:
    if isinstance(cursor, Cursor):
        return cursor
    return Cursor(cursor)


def parse_value(cursor: Cursor | FileContents) -> tuple[Cursor, Value]:
    '''
    Parse a string, list or object.

    :param cursor: Where the value begins, or the text to parse
    :type cursor: :class:`Cursor` | :class:`FileContents`

    :raises: :exc:`NoValueFound` at the start of the value when none of
        the three kinds can be parsed
    '''
    return run_rule(_value, _as_cursor(cursor))


def parse_list(cursor: Cursor | FileContents) -> tuple[Cursor, list[Value]]:
    '''
    Parse a bracketed list of values separated by semicolons.

    :param cursor: Positioned at the opening bracket, or the text to parse
    :type cursor: :class:`Cursor` | :class:`FileContents`
    '''
    return run_rule(_list, _as_cursor(cursor))


def parse_object(cursor: Cursor | FileContents) -> tuple[Cursor, PairList]:
    '''
    Parse parenthesized key-value pairs.

    :param cursor: Positioned at the opening parenthesis, or the text to
        parse
    :type cursor: :class:`Cursor` | :class:`FileContents`
    '''
    return run_rule(_object, _as_cursor(cursor))


def parse_key_value_pair(cursor: Cursor | FileContents) -> tuple[Cursor, Pair]:
    '''
    Parse a single ``key=value`` pair.

    :param cursor: Positioned at the key, or the text to parse
    :type cursor: :class:`Cursor` | :class:`FileContents`
    '''
    return run_rule(_key_value_pair, _as_cursor(cursor))


def parse_key_value_pairs(
    cursor: Cursor | FileContents
) -> tuple[Cursor, PairList]:
    '''
    Parse key-value pairs separated by semicolons.
    Stop at the first thing that cannot continue the sequence and return
    a cursor positioned there, so that the caller can deal with it.

    :param cursor: Where the pairs begin, or the text to parse
    :type cursor: :class:`Cursor` | :class:`FileContents`

    :raises: :exc:`ParseError` only when the first pair is malformed
    '''
    return run_rule(_key_value_pairs, _as_cursor(cursor))


def parse(text: FileContents | bytes) -> tuple[FileContents, PairList]:
    '''
    Parse config text.
    Return the text left unparsed and the key-value pairs, in order.

    :param text: The text to parse, as a string or UTF-8 bytes
    :type text: :class:`FileContents` | :class:`bytes`

    :raises: :exc:`ParseError` when the first pair is malformed
    '''
    if isinstance(text, bytes):
        text = text.decode(ENCODING)
    cursor, pairs = parse_key_value_pairs(Cursor(text))
    logger.debug(
        f"Parsed {len(pairs)} pairs; {len(text) - cursor.pos} characters"
        f" left after offset {cursor.offset}"
    )
    return cursor.rest, pairs


def parse_file(file: PathLike) -> tuple[FileContents, PairList]:
    '''
    Read a config file and parse its contents.
    Errors raised from here know the name of the file.

    :param file: The file to parse
    :type file: :class:`PathLike`
    '''
    with open(file, 'r', encoding=ENCODING, newline='') as f:
        text = f.read()
    try:
        return parse(text)
    except ParseError as e:
        e.filename = str(file)
        raise
