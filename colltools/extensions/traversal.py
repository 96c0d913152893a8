from __future__ import annotations
from ..types import *


def for_each(source: Optional[Iterable[T]], visit: IndexedVisitor[T]) -> None:
    """
    call visit(item, index) for every item of an iterable, an iterator or an
    old-style indexable sequence. the index starts at 0 and counts visited items.
    a None source is a silent no-op. errors raised by visit stop the traversal
    and propagate unchanged.
    """
    if source is None:
        return
    for index, item in enumerate(source):
        visit(item, index)


def for_each_entry(mapping: Optional[Dict[K, V]], visit: EntryVisitor[K, V]) -> None:
    """call visit(key, value, index) for every entry of a mapping; None is a no-op"""
    if mapping is None:
        return
    for index, (key, value) in enumerate(mapping.items()):
        visit(key, value, index)
