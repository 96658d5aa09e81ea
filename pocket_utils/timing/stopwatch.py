"""Single-use stopwatch measuring elapsed time from creation to one stop."""

from __future__ import annotations

import logging
from logging import Formatter, BASIC_FORMAT
import threading
from datetime import datetime, timedelta

from ..utils import SYSTEM_CLOCK, Clock

logger = logging.getLogger(__name__)
handler = logging.StreamHandler()
handler.setLevel(logging.INFO)
handler.setFormatter(Formatter(BASIC_FORMAT))
logger.addHandler(handler)

_NS_PER_US = 1_000
_NS_PER_MS = 1_000_000


class Stopwatch:
    """Stopwatch that starts on creation and can be stopped exactly once.

    The start is recorded as a wall-clock UTC timestamp; elapsed time is
    measured on the monotonic clock, so ``end_time`` is always
    ``start_time + elapsed`` and never precedes the start. Only the first
    :meth:`stop` is recorded; later calls are no-ops. Stopping is safe from
    several threads at once.

        sw = Stopwatch.create_and_start()
        ... do work ...
        print(sw.stop_and_get_millis())
    """

    def __init__(self, *, clock: Clock | None = None) -> None:
        self._clock = clock or SYSTEM_CLOCK
        self._lock = threading.Lock()
        self._start_time = self._clock.utc_now()
        self._start_ns = self._clock.monotonic_ns()
        self._end_ns: int | None = None

    @classmethod
    def create_and_start(cls, *, clock: Clock | None = None) -> Stopwatch:
        """Return a new stopwatch, already running from this instant."""

        return cls(clock=clock)

    # ------------------------------------------------------------------ #
    # State
    # ------------------------------------------------------------------ #
    @property
    def start_time(self) -> datetime:
        return self._start_time

    @property
    def end_time(self) -> datetime | None:
        """Stop timestamp, or ``None`` while the stopwatch is still running."""

        end_ns = self._read_end_ns()
        if end_ns is None:
            return None
        return self._start_time + _to_timedelta(end_ns - self._start_ns)

    @property
    def is_running(self) -> bool:
        return self._read_end_ns() is None

    def stop(self) -> None:
        """Record the stop instant unless one is already recorded."""

        with self._lock:
            if self._end_ns is not None:
                return
            # Never let a misbehaving clock put the end before the start.
            self._end_ns = max(self._clock.monotonic_ns(), self._start_ns)
        logger.debug("Stopwatch stopped after %d ms", self.millis)

    # ------------------------------------------------------------------ #
    # Derived readings
    # ------------------------------------------------------------------ #
    @property
    def elapsed_ns(self) -> int:
        """Nanoseconds until the stop, or until now while running."""

        end_ns = self._read_end_ns()
        if end_ns is None:
            end_ns = max(self._clock.monotonic_ns(), self._start_ns)
        return end_ns - self._start_ns

    @property
    def duration(self) -> timedelta:
        return _to_timedelta(self.elapsed_ns)

    @property
    def millis(self) -> int:
        """Whole milliseconds of :attr:`duration`, sub-millisecond part dropped."""

        return _to_millis(self.elapsed_ns)

    def stop_and_get_duration(self) -> timedelta:
        self.stop()
        return self.duration

    def stop_and_get_millis(self) -> int:
        self.stop()
        return self.millis

    # ------------------------------------------------------------------ #
    def __enter__(self) -> Stopwatch:
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.stop()
        return False

    def __repr__(self) -> str:
        state = "running" if self.is_running else "stopped"
        return f"<Stopwatch {state} {self.millis} ms since {self._start_time.isoformat()}>"

    def _read_end_ns(self) -> int | None:
        with self._lock:
            return self._end_ns


def _to_timedelta(elapsed_ns: int) -> timedelta:
    return timedelta(microseconds=elapsed_ns // _NS_PER_US)


def _to_millis(elapsed_ns: int) -> int:
    return elapsed_ns // _NS_PER_MS
