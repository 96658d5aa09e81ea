"""Substitute an empty container for ``None``, particularly useful in pipelines.

Each helper returns its argument unchanged when it is not ``None`` and the
shared, read-only empty instance of the same kind otherwise:

    for item in safe_list(payload.get("items")):
        ...

The empty instances are shared between callers and must not be mutated.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence, Set
from typing import Optional, TypeVar

from .empty import (
    EMPTY_ITERATOR,
    EMPTY_LIST,
    EMPTY_MAP,
    EMPTY_NAVIGABLE_MAP,
    EMPTY_NAVIGABLE_SET,
    EMPTY_SET,
    EMPTY_SORTED_MAP,
    EMPTY_SORTED_SET,
)

E = TypeVar("E")
K = TypeVar("K")
V = TypeVar("V")
S = TypeVar("S", bound=Set)
M = TypeVar("M", bound=Mapping)


def safe_list(items: Optional[Sequence[E]]) -> Sequence[E]:
    """Return ``items``, or an empty sequence if it is ``None``."""

    return items if items is not None else EMPTY_LIST


def safe_set(items: Optional[Set[E]]) -> Set[E]:
    """Return ``items``, or an empty set if it is ``None``."""

    return items if items is not None else EMPTY_SET


def safe_sorted_set(items: Optional[S]) -> S:
    """Return ``items``, or an empty sorted set if it is ``None``."""

    return items if items is not None else EMPTY_SORTED_SET  # type: ignore[return-value]


def safe_navigable_set(items: Optional[S]) -> S:
    """Return ``items``, or an empty navigable set if it is ``None``."""

    return items if items is not None else EMPTY_NAVIGABLE_SET  # type: ignore[return-value]


def safe_map(mapping: Optional[Mapping[K, V]]) -> Mapping[K, V]:
    """Return ``mapping``, or an empty mapping if it is ``None``."""

    return mapping if mapping is not None else EMPTY_MAP


def safe_sorted_map(mapping: Optional[M]) -> M:
    """Return ``mapping``, or an empty sorted mapping if it is ``None``."""

    return mapping if mapping is not None else EMPTY_SORTED_MAP  # type: ignore[return-value]


def safe_navigable_map(mapping: Optional[M]) -> M:
    """Return ``mapping``, or an empty navigable mapping if it is ``None``."""

    return mapping if mapping is not None else EMPTY_NAVIGABLE_MAP  # type: ignore[return-value]


def safe_iterator(iterator: Optional[Iterator[E]]) -> Iterator[E]:
    """Return ``iterator``, or an already exhausted iterator if it is ``None``."""

    return iterator if iterator is not None else EMPTY_ITERATOR


safe_enumeration = safe_iterator
