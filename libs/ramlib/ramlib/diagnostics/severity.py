"""Validation result levels for ramlib."""

from __future__ import annotations

from enum import Enum


class Level(Enum):
    """Severity level of a validation result."""

    ERROR = "error"
    WARN = "warn"
    INFO = "info"

    def __str__(self) -> str:
        return self.value
