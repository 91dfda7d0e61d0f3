"""ramlib diagnostics subpackage (Layer 0, depends only on PyYAML types)."""

from ramlib.diagnostics.collector import IncludeStackError, ValidationCollector
from ramlib.diagnostics.include import IncludeInfo
from ramlib.diagnostics.location import Mark, SourceMark
from ramlib.diagnostics.report import load_report_schema, result_to_dict, results_to_dict
from ramlib.diagnostics.result import ValidationResult, all_valid, filter_by_severity
from ramlib.diagnostics.severity import Level

__all__ = [
    "Level",
    "Mark",
    "SourceMark",
    "IncludeInfo",
    "ValidationResult",
    "all_valid",
    "filter_by_severity",
    "ValidationCollector",
    "IncludeStackError",
    "result_to_dict",
    "results_to_dict",
    "load_report_schema",
]
