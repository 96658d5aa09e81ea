"""Configuration models for the timing helpers."""

from .timing import TimingConfig

__all__ = ["TimingConfig"]
