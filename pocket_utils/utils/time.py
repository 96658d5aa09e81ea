"""Time helpers primarily to ease unit-testing."""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """Source of wall-clock timestamps and monotonic readings."""

    def utc_now(self) -> datetime: ...

    def monotonic_ns(self) -> int: ...


class SystemClock:
    """Clock backed by the interpreter's wall and monotonic clocks."""

    def utc_now(self) -> datetime:
        """Return the current wall-clock time as an aware UTC datetime."""

        return datetime.now(timezone.utc)

    def monotonic_ns(self) -> int:
        """Return the monotonic clock in nanoseconds."""

        return time.monotonic_ns()


SYSTEM_CLOCK = SystemClock()
