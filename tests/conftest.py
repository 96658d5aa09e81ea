from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from pocket_utils.configs import TimingConfig


class FakeClock:
    """Manually advanced clock; wall and monotonic readings move together."""

    def __init__(self) -> None:
        self.wall = datetime(2024, 1, 1, tzinfo=timezone.utc)
        self.ns = 5_000_000_000

    def utc_now(self) -> datetime:
        return self.wall

    def monotonic_ns(self) -> int:
        return self.ns

    def advance(self, *, ms: float = 0.0, ns: int = 0) -> None:
        step = int(ms * 1_000_000) + ns
        self.ns += step
        self.wall += timedelta(microseconds=step // 1_000)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def timing_config() -> TimingConfig:
    return TimingConfig(label="unit", log_level="info", threshold_ms=50)
