"""Collector for accumulating validation results during a validation pass."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

import yaml

from ramlib.diagnostics.include import IncludeInfo
from ramlib.diagnostics.result import ValidationResult, filter_by_severity
from ramlib.diagnostics.severity import Level

logger = logging.getLogger(__name__)


class IncludeStackError(Exception):
    """Raised when leaving an include that was never entered."""


class ValidationCollector:
    """Accumulates validation results and tags them with the live include stack.

    The include stack is innermost-first: the most recently entered include is
    at index 0. Every recorded result receives a snapshot of the stack as it
    was when the result was added.
    """

    def __init__(self, include_stack: Iterable[IncludeInfo] = ()) -> None:
        self._results: list[ValidationResult] = []
        self._include_stack: deque[IncludeInfo] = deque(include_stack)

    @property
    def include_depth(self) -> int:
        return len(self._include_stack)

    def push_include(self, frame: IncludeInfo) -> None:
        """Enter an included document."""
        self._include_stack.appendleft(frame)
        logger.debug("entering include %s (depth %d)", frame.include_name, self.include_depth)

    def pop_include(self) -> IncludeInfo:
        """Leave the innermost included document and return its frame."""
        if not self._include_stack:
            raise IncludeStackError("no include to leave")
        frame = self._include_stack.popleft()
        logger.debug("leaving include %s (depth %d)", frame.include_name, self.include_depth)
        return frame

    @contextmanager
    def including(self, frame: IncludeInfo) -> Iterator[IncludeInfo]:
        """Scope results recorded inside the block to ``frame``."""
        self.push_include(frame)
        try:
            yield frame
        finally:
            self.pop_include()

    def add(self, result: ValidationResult) -> ValidationResult:
        """Record a result, attaching the current include stack if it has none."""
        if not result.include_context:
            result = result.with_include_context(self._include_stack)
        self._results.append(result)
        logger.debug("recorded %s (include=%s)", result, result.include_name)
        return result

    def error(self, message: str, node: yaml.Node | None = None) -> ValidationResult:
        """Record an error, located at ``node`` when given."""
        if node is None:
            return self.add(ValidationResult.error(message))
        return self.add(ValidationResult.error_at_node(message, node))

    def warning(self, message: str) -> ValidationResult:
        """Record a warning."""
        return self.add(ValidationResult.create(Level.WARN, message))

    def info(self, message: str) -> ValidationResult:
        """Record an informational result."""
        return self.add(ValidationResult.create(Level.INFO, message))

    def has_errors(self) -> bool:
        """Return True if any error has been recorded."""
        return any(not r.is_valid for r in self._results)

    def get_all(self) -> list[ValidationResult]:
        """Return a copy of all recorded results."""
        return list(self._results)

    def get_level(self, level: Level) -> list[ValidationResult]:
        return filter_by_severity(level, self._results)

    def format_all(self) -> str:
        """Format all results as a newline-separated string."""
        return "\n".join(str(r) for r in self._results)
