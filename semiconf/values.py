__all__ = (
    'ListValue',
    'ObjectValue',
    'StringValue',
    'Unparser',
    'Value',
    'to_data',
)


from dataclasses import dataclass, field
from types import GeneratorType
from typing import TypeAlias

from ._types import PairList, PythonData


@dataclass(slots=True)
class StringValue:
    '''A string with its escape sequences already resolved.'''
    text: str


@dataclass(slots=True)
class ListValue:
    '''Values in the order they appear in the text.'''
    items: list['Value'] = field(default_factory=list)


@dataclass(slots=True)
class ObjectValue:
    '''
    Key-value pairs in the order they appear in the text.
    Keys may repeat; every pair is kept.
    '''
    pairs: PairList = field(default_factory=list)


Value: TypeAlias = StringValue | ListValue | ObjectValue


class Unparser:
    '''
    Convert value trees to Python data structures.

    :param as_dict: Turn objects into dicts instead of lists of
        ``(key, value)`` tuples. The last of any repeated keys wins.
    :type as_dict: :class:`bool`
    '''
    def __init__(self, as_dict: bool = False) -> None:
        self.as_dict = as_dict

    def unparse(self, node: Value | PairList) -> PythonData:
        '''
        Unparse a value or a list of pairs, converting it to an
        equivalent Python data structure.
        '''
        return self.visit(node)

    def visit(self, node: Value | PairList) -> PythonData:
        '''Drive the visitor generators with a stack, as `run_rule` does.'''
        stack = [self.genvisit(node)]
        result = None
        while stack:
            try:
                child = stack[-1].send(result)
            except StopIteration as e:
                stack.pop()
                result = e.value
            else:
                stack.append(self.genvisit(child))
                result = None
        return result

    def genvisit(self, node: Value | PairList):
        kind = type(node).__name__
        visitor = getattr(self, f'visit_{kind}', None)
        if visitor is None:
            raise TypeError(f"Cannot convert {kind!r} to Python data")
        converted = visitor(node)
        if isinstance(converted, GeneratorType):
            return (yield from converted)
        return converted

    def visit_StringValue(self, node: StringValue) -> str:
        return node.text

    def visit_ListValue(self, node: ListValue) -> list:
        l = []
        for e in node.items:
            l.append((yield e))
        return l

    def visit_ObjectValue(self, node: ObjectValue) -> list | dict:
        return (yield from self.visit_list(node.pairs))

    def visit_list(self, node: PairList) -> list | dict:
        pairs = []
        for key, val in node:
            pairs.append((key, (yield val)))
        if self.as_dict:
            return dict(pairs)
        return pairs


def to_data(node: Value | PairList, as_dict: bool = False) -> PythonData:
    '''
    Convert a value, or the pairs returned by :func:`semiconf.parse`,
    to Python data.

    :param node: The value or pairs to convert
    :type node: :class:`Value` | :class:`PairList`

    :param as_dict: Turn objects into dicts, defaults to ``False``
    :type as_dict: :class:`bool`
    '''
    return Unparser(as_dict).unparse(node)
