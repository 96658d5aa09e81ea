"""Elapsed-time measurement helpers."""

from .report import timed
from .stopwatch import Stopwatch

__all__ = ["Stopwatch", "timed"]
