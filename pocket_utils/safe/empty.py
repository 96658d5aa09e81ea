"""Canonical immutable empty containers."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Set
from types import MappingProxyType
from typing import Any, NoReturn


class EmptySortedSet(Set):
    """Empty sorted set supporting ordered-traversal queries.

    There is a single instance, :data:`EMPTY_SORTED_SET`. Range views of it
    (``head_set``, ``sub_set`` ...) are the instance itself.
    """

    _instance: EmptySortedSet | None = None
    __slots__ = ()

    def __new__(cls) -> EmptySortedSet:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __contains__(self, item: object) -> bool:
        return False

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __reversed__(self) -> Iterator[Any]:
        return iter(())

    def __len__(self) -> int:
        return 0

    __hash__ = Set._hash

    @classmethod
    def _from_iterable(cls, it: Any) -> frozenset:
        # Set operators build their result through this hook.
        return frozenset(it)

    def __repr__(self) -> str:
        return "EmptySortedSet()"

    def __reduce__(self) -> tuple[type, tuple[()]]:
        return (EmptySortedSet, ())

    # ------------------------------------------------------------------ #
    # Ordered-traversal queries
    # ------------------------------------------------------------------ #
    def first(self) -> NoReturn:
        raise KeyError("first(): set is empty")

    def last(self) -> NoReturn:
        raise KeyError("last(): set is empty")

    def lower(self, item: Any) -> None:
        return None

    def floor(self, item: Any) -> None:
        return None

    def ceiling(self, item: Any) -> None:
        return None

    def higher(self, item: Any) -> None:
        return None

    def head_set(self, upper: Any, inclusive: bool = False) -> EmptySortedSet:
        return self

    def tail_set(self, lower: Any, inclusive: bool = True) -> EmptySortedSet:
        return self

    def sub_set(
        self, lower: Any, upper: Any, *, lower_inclusive: bool = True, upper_inclusive: bool = False
    ) -> EmptySortedSet:
        return self

    def descending_set(self) -> EmptySortedSet:
        return self


class EmptySortedMap(Mapping):
    """Empty sorted mapping supporting ordered-traversal queries.

    There is a single instance, :data:`EMPTY_SORTED_MAP`. Key lookups raise
    ``KeyError``; neighbour queries return ``None``.
    """

    _instance: EmptySortedMap | None = None
    __slots__ = ()

    def __new__(cls) -> EmptySortedMap:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __getitem__(self, key: Any) -> NoReturn:
        raise KeyError(key)

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __reversed__(self) -> Iterator[Any]:
        return iter(())

    def __len__(self) -> int:
        return 0

    def __repr__(self) -> str:
        return "EmptySortedMap()"

    def __reduce__(self) -> tuple[type, tuple[()]]:
        return (EmptySortedMap, ())

    # ------------------------------------------------------------------ #
    # Ordered-traversal queries
    # ------------------------------------------------------------------ #
    def first_key(self) -> NoReturn:
        raise KeyError("first_key(): mapping is empty")

    def last_key(self) -> NoReturn:
        raise KeyError("last_key(): mapping is empty")

    def first_item(self) -> None:
        return None

    def last_item(self) -> None:
        return None

    def lower_key(self, key: Any) -> None:
        return None

    def floor_key(self, key: Any) -> None:
        return None

    def ceiling_key(self, key: Any) -> None:
        return None

    def higher_key(self, key: Any) -> None:
        return None

    def lower_item(self, key: Any) -> None:
        return None

    def floor_item(self, key: Any) -> None:
        return None

    def ceiling_item(self, key: Any) -> None:
        return None

    def higher_item(self, key: Any) -> None:
        return None

    def head_map(self, upper: Any, inclusive: bool = False) -> EmptySortedMap:
        return self

    def tail_map(self, lower: Any, inclusive: bool = True) -> EmptySortedMap:
        return self

    def sub_map(
        self, lower: Any, upper: Any, *, lower_inclusive: bool = True, upper_inclusive: bool = False
    ) -> EmptySortedMap:
        return self

    def descending_map(self) -> EmptySortedMap:
        return self

    def key_set(self) -> EmptySortedSet:
        return EMPTY_SORTED_SET


class _EmptyIterator(Iterator):
    __slots__ = ()

    def __next__(self) -> NoReturn:
        raise StopIteration

    def __repr__(self) -> str:
        return "EmptyIterator()"


EMPTY_LIST: tuple[()] = ()
EMPTY_SET: frozenset = frozenset()
EMPTY_SORTED_SET = EmptySortedSet()
EMPTY_NAVIGABLE_SET = EMPTY_SORTED_SET
EMPTY_MAP: Mapping[Any, Any] = MappingProxyType({})
EMPTY_SORTED_MAP = EmptySortedMap()
EMPTY_NAVIGABLE_MAP = EMPTY_SORTED_MAP
EMPTY_ITERATOR: Iterator[Any] = _EmptyIterator()
