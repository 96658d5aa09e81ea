"""Public package surface for pocket-utils."""

from .configs import TimingConfig
from .safe import (
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
from .timing import Stopwatch, timed

__all__ = [
    "Stopwatch",
    "TimingConfig",
    "safe_enumeration",
    "safe_iterator",
    "safe_list",
    "safe_map",
    "safe_navigable_map",
    "safe_navigable_set",
    "safe_set",
    "safe_sorted_map",
    "safe_sorted_set",
    "timed",
]
