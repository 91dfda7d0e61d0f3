"""JSON-compatible reports of validation results.

Text rendering of a result leaves out its include trace; these dicts are where
tools correlating findings with included fragments get it from.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from importlib import resources
from typing import Any

from ramlib.diagnostics.include import IncludeInfo
from ramlib.diagnostics.location import Mark
from ramlib.diagnostics.result import ValidationResult, all_valid

SCHEMA_RESOURCE = "report.schema.json"


def _mark_to_dict(mark: Mark | None) -> dict[str, int] | None:
    if mark is None:
        return None
    return {"line": mark.line, "column": mark.column, "index": mark.index}


def _include_to_dict(frame: IncludeInfo) -> dict[str, Any]:
    return {
        "name": frame.include_name,
        "line": frame.line,
        "start_column": frame.start_column,
        "end_column": frame.end_column,
    }


def result_to_dict(result: ValidationResult) -> dict[str, Any]:
    """Serialize one result, include trace innermost first."""
    return {
        "level": result.level.value,
        "message": result.message,
        "start": _mark_to_dict(result.start_mark),
        "end": _mark_to_dict(result.end_mark),
        "include": [_include_to_dict(f) for f in result.include_context],
    }


def results_to_dict(results: Iterable[ValidationResult]) -> dict[str, Any]:
    """Serialize a validation pass with its overall verdict."""
    results = list(results)
    return {
        "valid": all_valid(results),
        "results": [result_to_dict(r) for r in results],
    }


def load_report_schema() -> dict[str, Any]:
    """Return the JSON Schema describing ``results_to_dict`` output."""
    text = resources.files("ramlib.diagnostics").joinpath(SCHEMA_RESOURCE).read_text(encoding="utf-8")
    return json.loads(text)
