from collections import deque
from .types import *
from .containers import OrderedSet, ReadOnlyList


# --- set factories ---

def new_set(ordering: Union[Ordering, bool], source: Optional[Iterable[T]] = None) -> Union[Set[T], OrderedSet[T]]:
    """
    build a set from a collection, an iterator or any iterable.
    insertion ordering gives an OrderedSet, hash ordering a builtin set.
    a None source gives an empty set of the requested ordering.
    """
    if Ordering.of(ordering) is Ordering.INSERTION:
        return OrderedSet(source if source is not None else ())
    return set(source) if source is not None else set()


def set_of(ordering: Union[Ordering, bool], *items: T) -> Union[Set[T], OrderedSet[T]]:
    """build a set from the given arguments"""
    return new_set(ordering, items)


def hash_set(*items: T) -> Set[T]:
    """build a hash-ordered set from the given arguments"""
    return new_set(Ordering.HASH, items)


def linked_hash_set(*items: T) -> OrderedSet[T]:
    """build an insertion-ordered set from the given arguments"""
    return new_set(Ordering.INSERTION, items)


# --- list factories ---

def new_list(layout: Union[Layout, bool], source: Optional[Iterable[T]] = None) -> Union[List[T], deque]:
    """
    build a list from a collection, an iterator or any iterable, preserving source order.
    the linked layout gives a deque, the contiguous layout a builtin list.
    a None source gives an empty container of the requested layout.
    """
    if Layout.of(layout) is Layout.LINKED:
        return deque(source) if source is not None else deque()
    return list(source) if source is not None else []


def list_of(layout: Union[Layout, bool], *items: T) -> Union[List[T], deque]:
    """build a list from the given arguments"""
    return new_list(layout, items)


def to_list(*items: T) -> List[T]:
    """build a contiguous, mutable list from the given arguments"""
    return list(items)


def of(*items: T) -> ReadOnlyList[T]:
    """build an immutable sequence; any mutation attempt raises UnsupportedOperationError"""
    return ReadOnlyList(to_list(*items))
