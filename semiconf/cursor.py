__all__ = (
    'Cursor',
)


from typing import NamedTuple, Self

from .constants import ENCODING
from ._types import ByteOffset, CharNo, FileContents


class Cursor(NamedTuple):
    '''
    A position in the text being parsed.
    Rules never change a cursor; they return a new one instead.

    :param text: The whole original input
    :type text: :class:`FileContents`

    :param pos: How many characters of `text` have been consumed,
        defaults to 0
    :type pos: :class:`CharNo`

    :param offset: How many bytes of `text` have been consumed,
        defaults to 0
    :type offset: :class:`ByteOffset`
    '''
    text: FileContents
    pos: CharNo = 0
    offset: ByteOffset = 0

    def __repr__(self):
        cls = type(self).__name__
        ahead = self.text[self.pos:self.pos + 10]
        return f"{cls}(offset={self.offset}, ahead={ahead!r})"

    @property
    def rest(self) -> FileContents:
        '''
        Return the text that has not been consumed yet.
        '''
        return self.text[self.pos:]

    def at_end(self) -> bool:
        '''
        Return whether the whole input has been consumed.
        '''
        return self.pos >= len(self.text)

    def peek(self) -> str:
        '''
        Return the next character, or ``''`` at the end of the input.
        '''
        return self.text[self.pos:self.pos + 1]

    def startswith(self, expected: str) -> bool:
        '''
        Return whether the remaining text begins with `expected`.
        '''
        return self.text.startswith(expected, self.pos)

    def advance(self, count: int = 1) -> Self:
        '''
        Return a new cursor moved `count` characters further along.
        Never moves past the end of the input.

        :param count: How many characters to consume, defaults to 1
        :type count: :class:`int`
        '''
        consumed = self.text[self.pos:self.pos + count]
        size = len(consumed.encode(ENCODING, 'surrogatepass'))
        return self._replace(
            pos=self.pos + len(consumed),
            offset=self.offset + size
        )
