"""Log how long a block or a function call took."""

from __future__ import annotations

import logging
from logging import Formatter, BASIC_FORMAT
import threading
from functools import wraps
from typing import Any, Callable, TypeVar

from ..configs import TimingConfig
from ..utils import Clock
from .stopwatch import Stopwatch

logger = logging.getLogger(__name__)
handler = logging.StreamHandler()
handler.setLevel(logging.INFO)
handler.setFormatter(Formatter(BASIC_FORMAT))
logger.addHandler(handler)

F = TypeVar("F", bound=Callable[..., Any])


class timed:
    """Context manager and decorator that times a block with a :class:`Stopwatch`.

        with timed("load index") as sw:
            ... do work ...

        @timed("rebuild")
        def rebuild(): ...

    Successful blocks are logged at ``config.log_level`` (or ``DEBUG`` when
    faster than ``config.threshold_ms``); failing blocks are logged at
    ``WARNING`` and the exception propagates unchanged.
    """

    def __init__(
        self,
        label: str | None = None,
        *,
        config: TimingConfig | None = None,
        logger: logging.Logger | None = None,
        clock: Clock | None = None,
    ):
        self.config = config or TimingConfig()
        self.label = label or self.config.label
        self._explicit_label = label is not None
        self._logger = logger
        self._clock = clock
        self._local = threading.local()

    def __enter__(self) -> Stopwatch:
        stopwatch = Stopwatch.create_and_start(clock=self._clock)
        self._running().append(stopwatch)
        return stopwatch

    def __exit__(self, exc_type, exc, tb) -> bool:
        elapsed_ms = self._running().pop().stop_and_get_millis()
        log = self._logger or logger
        if exc_type is not None:
            log.warning("%s failed after %d ms", self.label, elapsed_ms)
        else:
            log.log(self.config.level_for(elapsed_ms), "%s finished in %d ms", self.label, elapsed_ms)
        return False

    def __call__(self, func: F) -> F:
        label = self.label if self._explicit_label else func.__qualname__

        @wraps(func)
        def _wrapper(*args, **kwargs):
            # One stopwatch per call.
            with timed(label, config=self.config, logger=self._logger, clock=self._clock):
                return func(*args, **kwargs)

        return _wrapper  # type: ignore[return-value]

    def _running(self) -> list[Stopwatch]:
        # Innermost entry last, tracked per thread.
        stack = getattr(self._local, "stack", None)
        if stack is None:
            stack = self._local.stack = []
        return stack
