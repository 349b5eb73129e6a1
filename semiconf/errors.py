__all__ = (
    'CLIFatalError',
    'CLIUsageError',
    'ConfigError',
    'ExpectedLiteralNotFound',
    'IdentifierFirstCharNotAlphabetic',
    'NoValueFound',
    'ParseError',
    'PrematureEndOfInput',
    'UnknownEscapedSymbol',
    'locate',
)


from .constants import ENCODING
from ._types import ByteOffset, ColNo, LineNo, Location, TokenValue


def locate(text: str | bytes, offset: ByteOffset) -> Location:
    '''
    Convert a byte offset into 1-indexed line and column numbers.

    :param text: The text the offset points into
    :type text: :class:`str` | :class:`bytes`

    :param offset: The byte offset to convert
    :type offset: :class:`ByteOffset`
    '''
    if isinstance(text, str):
        text = text.encode(ENCODING, 'surrogatepass')
    before = text[:offset].decode(ENCODING, 'ignore')
    lineno = before.count('\n') + 1
    colno = len(before) - (before.rfind('\n') + 1) + 1
    return (lineno, colno)


class ConfigError(SyntaxError):
    '''
    Base exception for errors related to config text.
    '''
    pass


class ParseError(ConfigError):
    '''
    Raised when a grammar rule cannot match the text at a cursor.
    Every parse error records where the rule gave up.

    :param offset: The absolute byte offset at which the failure was
        detected
    :type offset: :class:`ByteOffset`

    :param msg: The reason for the failure
    :type msg: :class:`str`
    '''
    def __init__(self, offset: ByteOffset, msg: str) -> None:
        super().__init__(msg)
        self.offset = offset

    def __repr__(self):
        cls = type(self).__name__
        return f"{cls}(offset={self.offset}, msg={self.msg!r})"

    def locate(self, text: str | bytes) -> Location:
        '''
        Convert the byte offset of the error into line and column
        numbers within `text`, both 1-indexed.

        :param text: The text that failed to parse
        :type text: :class:`str` | :class:`bytes`
        '''
        return locate(text, self.offset)

    def error_leader(
        self,
        lineno: LineNo,
        colno: ColNo = None,
    ) -> str:
        '''
        Return the beginning of an error message that features the
        filename, line number and possibly column number.

        :param lineno: The line number to show
        :type lineno: :class:`LineNo`

        :param colno: The column number to show, optional
        :type colno: :class:`ColNo`
        '''
        file = f"File {self.filename}, " if self.filename is not None else ''
        column = f", column {colno}" if colno is not None else ''
        return f"{file}Line {lineno}{column}: "

    def highlight(
        self,
        text: str | bytes,
        indent: int = 2,
    ) -> str:
        '''
        Describe the error using the line of `text` in which it occurred.
        Return the error leader and message followed by the offending
        line and a line with an arrow that points to the failing column.

        :param text: The text that failed to parse
        :type text: :class:`str` | :class:`bytes`

        :param indent: Indent the line and arrow by this many spaces,
            defaults to 2
        :type indent: :class:`int`
        '''
        if isinstance(text, bytes):
            text = text.decode(ENCODING, 'replace')
        lineno, colno = self.locate(text)
        line = text.split('\n')[lineno - 1]

        dent = ' ' * indent
        # Leading whitespace is dropped, so move the arrow left as well:
        stripped = line.lstrip()
        distance = max(colno - 1 - (len(line) - len(stripped)), 0)
        arrow = dent + ' ' * distance + '^'
        line = dent + stripped.rstrip()

        leader = self.error_leader(lineno, colno)
        return '\n'.join((leader + self.msg, line, arrow))


class IdentifierFirstCharNotAlphabetic(ParseError):
    '''
    Raised when a key does not begin with an alphabetic character.
    '''
    def __init__(self, offset: ByteOffset) -> None:
        super().__init__(offset, "Expected an identifier")


class PrematureEndOfInput(ParseError):
    '''
    Raised when the text ends in the middle of a construct.
    '''
    def __init__(self, offset: ByteOffset) -> None:
        super().__init__(offset, "Unexpected end of input")


class ExpectedLiteralNotFound(ParseError):
    '''
    Raised when the text does not continue with a required literal.

    :param expected: The literal that was required
    :type expected: :class:`TokenValue`
    '''
    def __init__(self, offset: ByteOffset, expected: TokenValue) -> None:
        super().__init__(offset, f"Expected {expected!r}")
        self.expected = expected


class UnknownEscapedSymbol(ParseError):
    '''
    Raised when a backslash in a string escapes anything but a quote
    or another backslash.

    :param char: The escaped character
    :type char: :class:`str`
    '''
    def __init__(self, offset: ByteOffset, char: str) -> None:
        super().__init__(offset, f"Unknown escape sequence: '\\{char}'")
        self.char = char


class NoValueFound(ParseError):
    '''
    Raised when no string, list or object begins at the offset.
    '''
    def __init__(self, offset: ByteOffset) -> None:
        super().__init__(offset, "Expected a string, list or object")


class CLIFatalError(Exception):
    '''
    Base class for errors that cause the CLI program to exit.

    :param msg: The error message to issue when exiting
    :type msg: :class:`str`
    '''
    def __init__(self, msg: str) -> None:
        super().__init__()
        self.msg = msg

    def __str__(self):
        return self.msg


class CLIUsageError(CLIFatalError):
    '''
    Raised when the CLI program is used incorrectly.
    '''
    pass
