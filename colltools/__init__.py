r"""
'                  _ _ _              _
'         ___ ___ | | | |_ ___   ___ | |___
'        / __/ _ \| | | __/ _ \ / _ \| / __|
'       | (_| (_) | | | || (_) | (_) | \__ \
'        \___\___/|_|_|\__\___/ \___/|_|___/
"""

# expose the call-time options and supporting data classes
from .types import Entry, Ordering, Layout, Shape

# expose the error types
from .errors import ArgumentError, UnsupportedOperationError

# expose the containers
from .containers import (
    OrderedSet,
    SortedDict,
    SortedSet,
    ReadOnlyView,
    ReadOnlyList,
    ReadOnlySet
)

# expose the factory functions
from .factories import (
    new_set,
    set_of,
    hash_set,
    linked_hash_set,
    new_list,
    list_of,
    to_list,
    of
)

# expose the transformations
from .extensions.sort import (
    sort_sequence,
    sort_mapping,
    sort_entries_to_mapping,
    sort_mapping_by_entry,
    sort_entries_by_value,
    compare_values
)
from .extensions.traversal import for_each, for_each_entry
from .extensions.padding import pad_left, pad_right
from .extensions.backfill import backfill
from .extensions.accessors import values, unmodifiable, empty

# define what `import *` does
__all__ = [
    "Entry",
    "Ordering",
    "Layout",
    "Shape",
    "ArgumentError",
    "UnsupportedOperationError",
    "OrderedSet",
    "SortedDict",
    "SortedSet",
    "ReadOnlyView",
    "ReadOnlyList",
    "ReadOnlySet",
    "new_set",
    "set_of",
    "hash_set",
    "linked_hash_set",
    "new_list",
    "list_of",
    "to_list",
    "of",
    "sort_sequence",
    "sort_mapping",
    "sort_entries_to_mapping",
    "sort_mapping_by_entry",
    "sort_entries_by_value",
    "compare_values",
    "for_each",
    "for_each_entry",
    "pad_left",
    "pad_right",
    "backfill",
    "values",
    "unmodifiable",
    "empty"
]
