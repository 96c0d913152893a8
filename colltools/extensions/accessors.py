from __future__ import annotations
import logging
from collections.abc import Collection, Sequence, Set as AbstractSet
from ..types import *
from ..errors import ArgumentError, require_not_none
from ..containers import ReadOnlyView, ReadOnlyList, ReadOnlySet, SortedSet

logger = logging.getLogger(__name__)

# canonical empties, shared because nothing can mutate them
_EMPTY_LIST: ReadOnlyList[Any] = ReadOnlyList([])
_EMPTY_SET: frozenset = frozenset()
_EMPTY_SORTED_SET: ReadOnlySet[Any] = ReadOnlySet(SortedSet())


def values(mappings: Iterable[Dict[Any, V]]) -> List[V]:
    """concatenate the values of every mapping, in order, keeping duplicates"""
    require_not_none(mappings, 'mappings')
    result: List[V] = []
    for mapping in mappings:
        result.extend(mapping.values())
    return result


def unmodifiable(collection: Iterable[T]) -> ReadOnlyView[T]:
    """
    wrap a collection in a live read-only view. sequences get a ReadOnlyList,
    sets a ReadOnlySet, anything else a plain ReadOnlyView.
    """
    require_not_none(collection, 'collection')
    if isinstance(collection, Sequence):
        return ReadOnlyList(collection)
    if isinstance(collection, AbstractSet):
        return ReadOnlySet(collection)
    return ReadOnlyView(collection)


def _resolve_shape(shape: Union[Shape, type]) -> Shape:
    if isinstance(shape, Shape):
        return shape
    if isinstance(shape, type):
        if issubclass(shape, SortedSet):
            return Shape.SORTED_SET
        if issubclass(shape, AbstractSet):
            return Shape.SET
        if issubclass(shape, Sequence) and not issubclass(shape, (str, bytes, bytearray)):
            return Shape.LIST
    raise ArgumentError(f"[{shape!r}] is an unsupported shape for an empty collection")


def empty(shape: Union[Shape, type, None] = None) -> Collection:
    """
    return the shared empty instance for a container shape: a Shape member or a class.
    None gives an empty list.
    """
    if shape is None:
        return _EMPTY_LIST
    resolved = _resolve_shape(shape)
    logger.debug("serving canonical empty for %s", resolved.name)
    if resolved in (Shape.NAVIGABLE_SET, Shape.SORTED_SET):
        return _EMPTY_SORTED_SET
    if resolved is Shape.SET:
        return _EMPTY_SET
    return _EMPTY_LIST
