from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import (
    Collection, MutableMapping, MutableSet, Sequence, Set as AbstractSet
)
from functools import cmp_to_key
from .types import *
from .errors import UnsupportedOperationError


def _natural_key(item):
    return item


# --- insertion-ordered set ---

class OrderedSet(MutableSet[T]):
    """
    a set that iterates in first-insertion order.
    relies on dicts preserving insertion order; re-adding an element does not move it.
    """

    def __init__(self, items: Iterable[T] = ()):
        self._items: Dict[T, None] = dict.fromkeys(items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, item: T) -> None:
        self._items[item] = None

    def discard(self, item: T) -> None:
        self._items.pop(item, None)

    def clear(self) -> None:
        self._items.clear()

    def update(self, items: Iterable[T]) -> None:
        for item in items:
            self._items[item] = None

    def __repr__(self) -> str:
        return f"OrderedSet({list(self._items)!r})"


# --- comparator-sorted mapping and set ---

class SortedDict(MutableMapping[K, V]):
    """
    a mapping whose keys iterate in the order given by a comparator.
    two keys comparing equal are the same key: writing one replaces the value
    and keeps the key already stored. with no comparator, natural ordering is used.
    """

    def __init__(self, comparator: Optional[Comparer[K]] = None, items=()):
        self._comparator = comparator
        self._sort_key = cmp_to_key(comparator) if comparator is not None else _natural_key
        self._keys: List[K] = []
        self._values: List[V] = []
        self.update(items)

    @property
    def comparator(self) -> Optional[Comparer[K]]:
        return self._comparator

    def _bisect_left(self, key: K) -> int:
        return bisect_left(self._keys, self._sort_key(key), key=self._sort_key)

    def _bisect_right(self, key: K) -> int:
        return bisect_right(self._keys, self._sort_key(key), key=self._sort_key)

    def _index_of(self, key: K) -> int:
        """position of an equal key, or -1"""
        index = self._bisect_left(key)
        if index < len(self._keys):
            probe = self._sort_key(key)
            stored = self._sort_key(self._keys[index])
            if not probe < stored and not stored < probe:
                return index
        return -1

    def __getitem__(self, key: K) -> V:
        index = self._index_of(key)
        if index < 0:
            raise KeyError(key)
        return self._values[index]

    def __setitem__(self, key: K, value: V) -> None:
        index = self._index_of(key)
        if index >= 0:
            self._values[index] = value
            return
        index = self._bisect_left(key)
        self._keys.insert(index, key)
        self._values.insert(index, value)

    def __delitem__(self, key: K) -> None:
        index = self._index_of(key)
        if index < 0:
            raise KeyError(key)
        del self._keys[index]
        del self._values[index]

    def __contains__(self, key: object) -> bool:
        return self._index_of(key) >= 0

    def __iter__(self) -> Iterator[K]:
        return iter(list(self._keys))

    def __reversed__(self) -> Iterator[K]:
        return reversed(list(self._keys))

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        pairs = ', '.join(f"{k!r}: {v!r}" for k, v in zip(self._keys, self._values))
        return f"SortedDict({{{pairs}}})"

    # --- navigation ---

    def first_key(self) -> K:
        if not self._keys: raise KeyError("mapping is empty")
        return self._keys[0]

    def last_key(self) -> K:
        if not self._keys: raise KeyError("mapping is empty")
        return self._keys[-1]

    def floor_key(self, key: K) -> Optional[K]:
        """greatest key less than or equal to key"""
        index = self._bisect_right(key)
        return self._keys[index - 1] if index > 0 else None

    def ceiling_key(self, key: K) -> Optional[K]:
        """least key greater than or equal to key"""
        index = self._bisect_left(key)
        return self._keys[index] if index < len(self._keys) else None

    def lower_key(self, key: K) -> Optional[K]:
        """greatest key strictly less than key"""
        index = self._bisect_left(key)
        return self._keys[index - 1] if index > 0 else None

    def higher_key(self, key: K) -> Optional[K]:
        """least key strictly greater than key"""
        index = self._bisect_right(key)
        return self._keys[index] if index < len(self._keys) else None


class SortedSet(MutableSet[T]):
    """a navigable set kept in comparator order, backed by a SortedDict with unused values."""

    def __init__(self, items: Iterable[T] = (), comparator: Optional[Comparer[T]] = None):
        self._map: SortedDict[T, None] = SortedDict(comparator)
        for item in items:
            self._map[item] = None

    @property
    def comparator(self) -> Optional[Comparer[T]]:
        return self._map.comparator

    def __contains__(self, item: object) -> bool:
        return item in self._map

    def __iter__(self) -> Iterator[T]:
        return iter(self._map)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def add(self, item: T) -> None:
        self._map[item] = None

    def discard(self, item: T) -> None:
        self._map.pop(item, None)

    def first(self) -> T: return self._map.first_key()
    def last(self) -> T: return self._map.last_key()
    def floor(self, item: T) -> Optional[T]: return self._map.floor_key(item)
    def ceiling(self, item: T) -> Optional[T]: return self._map.ceiling_key(item)
    def lower(self, item: T) -> Optional[T]: return self._map.lower_key(item)
    def higher(self, item: T) -> Optional[T]: return self._map.higher_key(item)

    def __repr__(self) -> str:
        return f"SortedSet({list(self._map)!r})"


# --- read-only views ---

_MUTATORS = frozenset({
    'add', 'append', 'appendleft', 'clear', 'discard', 'extend', 'extendleft',
    'insert', 'pop', 'popitem', 'popleft', 'remove', 'reverse', 'rotate',
    'setdefault', 'sort', 'update', 'difference_update',
    'intersection_update', 'symmetric_difference_update',
})


def _reject(name: str) -> Callable[..., Any]:
    def rejected(*args, **kwargs):
        raise UnsupportedOperationError(f"'{name}' is not supported on a read-only view")
    return rejected


class ReadOnlyView(Collection[T]):
    """
    a live, non-copying read-only wrapper over a collection.
    reads go to the wrapped collection, so later changes made through the
    original reference are visible. mutating methods raise UnsupportedOperationError;
    any other attribute is delegated.
    """
    __slots__ = ('_source',)

    def __init__(self, source: Collection[T]):
        self._source = source

    def __contains__(self, item: object) -> bool:
        return item in self._source

    def __iter__(self) -> Iterator[T]:
        return iter(self._source)

    def __len__(self) -> int:
        return len(self._source)

    def __getitem__(self, index):
        return self._source[index]

    def __setitem__(self, index, value):
        raise UnsupportedOperationError("item assignment is not supported on a read-only view")

    def __delitem__(self, index):
        raise UnsupportedOperationError("item deletion is not supported on a read-only view")

    def __getattr__(self, name: str) -> Any:
        if name == '_source':
            raise AttributeError(name)
        if name in _MUTATORS:
            return _reject(name)
        return getattr(self._source, name)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ReadOnlyView):
            other = other._source
        return self._source == other

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source!r})"


class ReadOnlyList(ReadOnlyView[T], Sequence[T]):
    """read-only view over a sequence, with indexing"""
    __slots__ = ()

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._source)

    def __iadd__(self, other):
        raise UnsupportedOperationError("'+=' is not supported on a read-only view")

    def __imul__(self, other):
        raise UnsupportedOperationError("'*=' is not supported on a read-only view")


class ReadOnlySet(ReadOnlyView[T], AbstractSet[T]):
    """read-only view over a set; set algebra returns plain frozensets"""
    __slots__ = ()

    @classmethod
    def _from_iterable(cls, items: Iterable[T]) -> frozenset:
        return frozenset(items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ReadOnlyView):
            other = other._source
        return AbstractSet.__eq__(self, other)

    __hash__ = None
