from __future__ import annotations
import logging
import math
from collections.abc import Set as AbstractSet
from functools import cmp_to_key

import numpy as np

from ..types import *
from ..errors import require_not_none
from ..containers import SortedDict

logger = logging.getLogger(__name__)


def _as_entry(item) -> Entry:
    return item if isinstance(item, Entry) else Entry(*item)


def sort_sequence(collection: Iterable[T], comparator: Comparer[T]) -> List[T]:
    """copy into a new list and stable-sort it by the comparator. the input is left untouched."""
    require_not_none(collection, 'collection')
    require_not_none(comparator, 'comparator')
    return sorted(collection, key=cmp_to_key(comparator))


def sort_mapping(mapping: Dict[K, V], key_comparator: Comparer[K]) -> SortedDict[K, V]:
    """copy all entries into a SortedDict ordered by the key comparator"""
    require_not_none(mapping, 'mapping')
    require_not_none(key_comparator, 'key_comparator')
    return SortedDict(key_comparator, mapping)


def sort_entries_to_mapping(entries: Iterable[Union[Entry, Tuple[K, V]]],
                            entry_comparator: Comparer[Entry]) -> Dict[K, V]:
    """
    stable-sort entries by the comparator, then insert them into a dict in that order,
    so the dict's insertion order is the sorted order.
    entries may be Entry instances or (key, value) pairs; the comparator always sees Entry.
    """
    require_not_none(entries, 'entries')
    require_not_none(entry_comparator, 'entry_comparator')
    ordered = sorted((_as_entry(item) for item in entries), key=cmp_to_key(entry_comparator))
    result = {}
    for entry in ordered:
        result[entry.key] = entry.value
    return result


def sort_mapping_by_entry(mapping: Dict[K, V], entry_comparator: Comparer[Entry]) -> Dict[K, V]:
    """sort a mapping by its entries; keys, values or both may drive the comparator"""
    require_not_none(mapping, 'mapping')
    return sort_entries_to_mapping(mapping.items(), entry_comparator)


# --- natural ordering with string fallback ---

def _is_orderable(value: Any) -> bool:
    """does the value's own type answer '<' for a value of that type with a total order"""
    # set '<' is the subset test, a partial order
    if isinstance(value, AbstractSet):
        return False
    return type(value).__lt__(value, value) is not NotImplemented


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def compare_values(left: Any, right: Any) -> int:
    """
    three-way comparison of two values. if the left value's type is orderable,
    natural ordering is used; otherwise the str() renderings are compared.
    nan sorts after every number and equal to another nan.
    the fallback is deterministic but makes no claim about semantic order.
    """
    if not _is_orderable(left):
        left, right = str(left), str(right)
    elif _is_nan(left) or _is_nan(right):
        return _is_nan(left) - _is_nan(right)
    if left < right: return -1
    if right < left: return 1
    return 0


def _compare_entry_values(first: Entry, second: Entry) -> int:
    return compare_values(first.value, second.value)


_FLOAT_EXACT_LIMIT = 2 ** 53


def _is_plain_number(value: Any) -> bool:
    # ints beyond float precision and nan would order differently inside a float64 array
    if isinstance(value, float):
        return not math.isnan(value)
    return isinstance(value, int) and -_FLOAT_EXACT_LIMIT <= value <= _FLOAT_EXACT_LIMIT


def _try_numpy_argsort(values: List[Any]) -> Optional[List[int]]:
    """stable sort order of plain numeric data, or None when numpy does not apply."""
    try:
        if values and all(_is_plain_number(v) for v in values):
            return np.argsort(np.array(values, dtype=float), kind='stable').tolist()
        return None
    except (TypeError, ValueError, OverflowError):
        return None


def sort_entries_by_value(entries: Iterable[Union[Entry, Tuple[K, V]]]) -> List[Entry]:
    """stable-sort entries by value using compare_values"""
    require_not_none(entries, 'entries')
    data = [_as_entry(item) for item in entries]
    order = _try_numpy_argsort([entry.value for entry in data])
    if order is not None:
        logger.debug("sorting %d numeric entries with numpy", len(data))
        return [data[i] for i in order]
    return sorted(data, key=cmp_to_key(_compare_entry_values))
