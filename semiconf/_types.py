__all__ = (
    'ByteOffset',
    'CharNo',
    'ColNo',
    'FileContents',
    'Key',
    'LineNo',
    'Location',
    'Pair',
    'PairList',
    'PythonData',
    'Rule',
    'RuleCall',
    'TokenValue',
)


from collections.abc import Callable, Generator
from typing import Any, TypeAlias


ByteOffset: TypeAlias = int
CharNo: TypeAlias = int
ColNo: TypeAlias = int
LineNo: TypeAlias = int
Location: TypeAlias = tuple[LineNo, ColNo]

FileContents: TypeAlias = str
Key: TypeAlias = str
TokenValue: TypeAlias = str

Pair: TypeAlias = tuple[Key, 'Value']
PairList: TypeAlias = list[Pair]

PythonData: TypeAlias = str | list | dict[str, Any]

# A recursive rule is a generator that yields (rule, cursor) calls to the
# rule runner and receives their (cursor, output) results back.
RuleCall: TypeAlias = tuple[Callable, 'Cursor']
Rule: TypeAlias = Callable[['Cursor'], Generator[RuleCall, Any, tuple['Cursor', Any]]]
