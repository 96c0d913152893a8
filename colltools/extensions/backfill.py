from __future__ import annotations
from ..types import *
from ..errors import require_not_none


def backfill(iterable: Iterable[E], mapping: Dict[K, V],
             key_of: KeySelector[E, K], apply: Setter[E, V]) -> None:
    """
    set values on the elements of an iterable from a lookup mapping.
    for each element, key_of(element) is looked up; when a non-None value is found,
    apply(element, value) is called. elements without a match are left alone.
    """
    require_not_none(iterable, 'iterable')
    for element in iterable:
        value = mapping.get(key_of(element))
        if value is not None:
            apply(element, value)
