"""Pydantic configuration for the timed logging helper."""

from __future__ import annotations

import logging
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator


class TimingConfig(BaseModel):
    """Knobs controlling how :func:`pocket_utils.timing.timed` reports."""

    label: str = "block"
    log_level: Union[int, str] = logging.INFO
    threshold_ms: Optional[int] = Field(default=None, ge=0)

    @field_validator("log_level", mode="before")
    @classmethod
    def _reject_bool_level(cls, value: object) -> object:
        if isinstance(value, bool):
            raise ValueError("log_level must be a level number or name, not a bool")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: Union[int, str]) -> int:
        if isinstance(value, int):
            if value < 0:
                raise ValueError("log_level must not be negative")
            return value
        level = logging.getLevelName(value.strip().upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level '{value}'")
        return level

    def level_for(self, elapsed_ms: int) -> int:
        """Return the level a successful block of ``elapsed_ms`` is logged at."""

        if self.threshold_ms is not None and elapsed_ms < self.threshold_ms:
            return logging.DEBUG
        return int(self.log_level)
