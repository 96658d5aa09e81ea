"""Null-safe access to containers."""

from .containers import (
    safe_enumeration,
    safe_iterator,
    safe_list,
    safe_map,
    safe_navigable_map,
    safe_navigable_set,
    safe_set,
    safe_sorted_map,
    safe_sorted_set,
)
from .empty import (
    EMPTY_ITERATOR,
    EMPTY_LIST,
    EMPTY_MAP,
    EMPTY_NAVIGABLE_MAP,
    EMPTY_NAVIGABLE_SET,
    EMPTY_SET,
    EMPTY_SORTED_MAP,
    EMPTY_SORTED_SET,
    EmptySortedMap,
    EmptySortedSet,
)

__all__ = [
    "EMPTY_ITERATOR",
    "EMPTY_LIST",
    "EMPTY_MAP",
    "EMPTY_NAVIGABLE_MAP",
    "EMPTY_NAVIGABLE_SET",
    "EMPTY_SET",
    "EMPTY_SORTED_MAP",
    "EMPTY_SORTED_SET",
    "EmptySortedMap",
    "EmptySortedSet",
    "safe_enumeration",
    "safe_iterator",
    "safe_list",
    "safe_map",
    "safe_navigable_map",
    "safe_navigable_set",
    "safe_set",
    "safe_sorted_map",
    "safe_sorted_set",
]
