"""Validation results for YAML-based API description documents."""

from ramlib.diagnostics import (
    IncludeInfo,
    Level,
    SourceMark,
    ValidationCollector,
    ValidationResult,
    all_valid,
    filter_by_severity,
)

__all__ = [
    "Level",
    "SourceMark",
    "IncludeInfo",
    "ValidationResult",
    "ValidationCollector",
    "all_valid",
    "filter_by_severity",
]
