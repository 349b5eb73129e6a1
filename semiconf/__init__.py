"""
########
semiconf
########

*Parse semicolon-separated key-value config text.*

**semiconf** reads text such as ``name='demo'; tags=['a'; 'b']; opts=(x='1')``
into a tree of strings, lists and objects, and reports the exact byte
offset of anything it cannot parse.


:copyright: (c) 2024-present semiconf contributors.
:license: MIT, see LICENSE for more details.
"""

__title__ = 'semiconf'
__description__ = "Parse semicolon-separated key-value config text."
__url__ = "https://github.com/semiconf/semiconf"
__version__ = '0.3'
__author__ = "semiconf contributors"
__license__ = 'MIT'
__copyright__ = "Copyright (c) 2024-present semiconf contributors"


__all__ = (
    'ConfigError',
    'Cursor',
    'ExpectedLiteralNotFound',
    'IdentifierFirstCharNotAlphabetic',
    'ListValue',
    'NoValueFound',
    'ObjectValue',
    'ParseError',
    'PrematureEndOfInput',
    'StringValue',
    'UnknownEscapedSymbol',
    'Value',
    'parse',
    'parse_file',
    'parse_key_value_pair',
    'parse_key_value_pairs',
    'parse_list',
    'parse_object',
    'parse_value',
    'to_data',
)


from .cursor import Cursor
from .errors import (
    ConfigError,
    ExpectedLiteralNotFound,
    IdentifierFirstCharNotAlphabetic,
    NoValueFound,
    ParseError,
    PrematureEndOfInput,
    UnknownEscapedSymbol,
)
from .grammar import (
    parse,
    parse_file,
    parse_key_value_pair,
    parse_key_value_pairs,
    parse_list,
    parse_object,
    parse_value,
)
from .values import ListValue, ObjectValue, StringValue, Value, to_data
