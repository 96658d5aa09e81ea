from __future__ import annotations

import threading
import time
from datetime import datetime, timedelta

import pytest

from pocket_utils import Stopwatch


def test_fresh_stopwatch_has_no_end_time(clock) -> None:
    sw = Stopwatch.create_and_start(clock=clock)
    assert sw.end_time is None
    assert sw.is_running
    assert sw.start_time == clock.wall


def test_stop_records_end_time(clock) -> None:
    sw = Stopwatch.create_and_start(clock=clock)
    clock.advance(ms=250)
    sw.stop()
    assert sw.end_time == sw.start_time + timedelta(milliseconds=250)
    assert not sw.is_running


def test_second_stop_does_not_move_end_time(clock) -> None:
    sw = Stopwatch.create_and_start(clock=clock)
    clock.advance(ms=10)
    sw.stop()
    first = sw.end_time
    clock.advance(ms=500)
    sw.stop()
    sw.stop()
    assert sw.end_time == first
    assert sw.millis == 10


def test_duration_grows_while_running(clock) -> None:
    sw = Stopwatch.create_and_start(clock=clock)
    clock.advance(ms=3)
    before = sw.duration
    clock.advance(ms=4)
    after = sw.duration
    assert before == timedelta(milliseconds=3)
    assert after == timedelta(milliseconds=7)
    assert sw.end_time is None


def test_duration_is_stable_after_stop(clock) -> None:
    sw = Stopwatch.create_and_start(clock=clock)
    clock.advance(ms=42)
    sw.stop()
    clock.advance(ms=1000)
    readings = {sw.duration for _ in range(5)}
    assert readings == {timedelta(milliseconds=42)}


def test_millis_truncates_sub_millisecond_part(clock) -> None:
    sw = Stopwatch.create_and_start(clock=clock)
    clock.advance(ns=1_999_999)
    assert sw.millis == 1
    assert sw.millis == sw.duration // timedelta(milliseconds=1)
    sw.stop()
    clock.advance(ms=5)
    assert sw.millis == 1
    assert sw.millis == sw.duration // timedelta(milliseconds=1)


def test_stop_and_get_duration_matches_stop_then_duration(clock) -> None:
    sw = Stopwatch.create_and_start(clock=clock)
    clock.advance(ms=12)
    assert sw.stop_and_get_duration() == timedelta(milliseconds=12)
    clock.advance(ms=12)
    assert sw.stop_and_get_duration() == sw.duration == timedelta(milliseconds=12)
    assert sw.stop_and_get_millis() == 12


def test_end_time_never_precedes_start(clock) -> None:
    sw = Stopwatch.create_and_start(clock=clock)
    clock.ns -= 1_000
    assert sw.duration == timedelta(0)
    sw.stop()
    assert sw.end_time == sw.start_time


def test_context_manager_stops_on_exit(clock) -> None:
    with Stopwatch(clock=clock) as sw:
        clock.advance(ms=8)
    assert not sw.is_running
    assert sw.millis == 8

    with pytest.raises(RuntimeError):
        with Stopwatch(clock=clock) as failing:
            raise RuntimeError("boom")
    assert failing.end_time is not None


def test_repr_reports_state(clock) -> None:
    sw = Stopwatch(clock=clock)
    assert "running" in repr(sw)
    sw.stop()
    assert "stopped 0 ms" in repr(sw)


def test_real_clock_is_monotonic() -> None:
    sw = Stopwatch.create_and_start()
    first = sw.duration
    time.sleep(0.02)
    second = sw.duration
    assert second >= first
    assert sw.stop_and_get_millis() >= 10


def test_concurrent_stops_record_one_end_time() -> None:
    sw = Stopwatch.create_and_start()
    barrier = threading.Barrier(50)

    def _stop() -> None:
        barrier.wait()
        sw.stop()

    threads = [threading.Thread(target=_stop) for _ in range(50)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    end_times = {sw.end_time for _ in range(50)}
    assert len(end_times) == 1
    assert None not in end_times


def test_readers_during_concurrent_stops_see_unset_or_final_value() -> None:
    sw = Stopwatch.create_and_start()
    barrier = threading.Barrier(60)
    readings: list[tuple[datetime | None, timedelta]] = []
    readings_lock = threading.Lock()

    def _stop() -> None:
        barrier.wait()
        sw.stop()

    def _read() -> None:
        barrier.wait()
        local = [(sw.end_time, sw.duration) for _ in range(200)]
        with readings_lock:
            readings.extend(local)

    threads = [threading.Thread(target=_stop) for _ in range(50)]
    threads += [threading.Thread(target=_read) for _ in range(10)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    final_end = sw.end_time
    final_duration = sw.duration
    assert final_end is not None
    assert len(readings) == 2000
    for end_time, duration in readings:
        assert end_time in (None, final_end)
        if end_time is not None:
            assert duration == final_duration
