__all__ = (
    'DEBUG',
    'ENCODING',
    'ESCAPE',
    'EQUALS',
    'L_BRACKET',
    'L_PAREN',
    'LOG_DATE_FORMAT',
    'LOG_FORMAT',
    'QUOTE',
    'R_BRACKET',
    'R_PAREN',
    'SEPARATOR',
)


from ._types import TokenValue


DEBUG: bool = False
'''The default debug state.'''

ENCODING: str = 'utf-8'
'''The encoding used to measure byte offsets and to read files.'''


# Used by the grammar:
QUOTE: TokenValue = "'"
'''Opens and closes a string.'''

ESCAPE: TokenValue = '\\'
'''Escapes a quote or another backslash inside a string.'''

EQUALS: TokenValue = '='
'''Separates a key from its value.'''

SEPARATOR: TokenValue = ';'
'''Separates pairs, and values in a list.'''

L_BRACKET: TokenValue = '['
R_BRACKET: TokenValue = ']'
L_PAREN: TokenValue = '('
R_PAREN: TokenValue = ')'


# Used by the logger:
LOG_FORMAT: str = '[{asctime}] ({levelname}:{name}) {message}'
'''The format of log records, using ``'{'`` style.'''

LOG_DATE_FORMAT: str = '%Y-%m-%d_%H:%M:%S'
'''The format of log record timestamps.'''
