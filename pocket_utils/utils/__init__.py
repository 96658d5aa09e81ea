"""Small utilities shared across modules."""

from .time import SYSTEM_CLOCK, Clock, SystemClock

__all__ = ["Clock", "SYSTEM_CLOCK", "SystemClock"]
