from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, NamedTuple
)
from .errors import ArgumentError

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
E = TypeVar('E')

Comparer = Callable[[T, T], int]
KeySelector = Callable[[T], K]
Setter = Callable[[E, V], Any]
IndexedVisitor = Callable[[T, int], Any]
EntryVisitor = Callable[[K, V, int], Any]


class Entry(NamedTuple):
    """an immutable key/value pair"""
    key: Any
    value: Any

    def __repr__(self) -> str:
        return f"Entry({self.key!r}={self.value!r})"


class Ordering(Enum):
    """iteration order of a set built by the factories"""
    HASH = 'hash'
    INSERTION = 'insertion'

    @classmethod
    def of(cls, value: Union['Ordering', bool]) -> 'Ordering':
        """accepts a member or the legacy flag (true means insertion order)"""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.INSERTION if value else cls.HASH
        raise ArgumentError(f"[{value!r}] is not an Ordering or a bool")


class Layout(Enum):
    """backing realization of a sequence built by the factories"""
    CONTIGUOUS = 'contiguous'
    LINKED = 'linked'

    @classmethod
    def of(cls, value: Union['Layout', bool]) -> 'Layout':
        """accepts a member or the legacy flag (true means linked)"""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.LINKED if value else cls.CONTIGUOUS
        raise ArgumentError(f"[{value!r}] is not a Layout or a bool")


class Shape(Enum):
    """container shapes served by accessors.empty()"""
    NAVIGABLE_SET = 'navigable_set'
    SORTED_SET = 'sorted_set'
    SET = 'set'
    LIST = 'list'
