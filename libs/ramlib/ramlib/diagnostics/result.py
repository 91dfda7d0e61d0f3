"""Validation result representation and aggregate helpers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

import yaml

from ramlib.diagnostics.include import IncludeInfo
from ramlib.diagnostics.location import Mark
from ramlib.diagnostics.severity import Level


@dataclass(frozen=True)
class ValidationResult:
    """A single finding produced while validating a document.

    Results are created through the factory classmethods. The include trace
    is innermost-first and starts out empty; ``with_include_context`` returns
    a copy carrying a snapshot of the caller's include stack.
    """

    level: Level
    message: str
    start_mark: Mark | None = field(default=None, repr=False)
    end_mark: Mark | None = field(default=None, repr=False)
    include_context: tuple[IncludeInfo, ...] = field(default=(), repr=False)

    @classmethod
    def error(
        cls,
        message: str,
        start_mark: Mark | None = None,
        end_mark: Mark | None = None,
    ) -> ValidationResult:
        """Create an error, optionally spanning ``start_mark`` to ``end_mark``."""
        return cls(Level.ERROR, message, start_mark, end_mark)

    @classmethod
    def error_at_node(cls, message: str, node: yaml.Node) -> ValidationResult:
        """Create an error spanning a composed YAML node."""
        return cls.error(message, node.start_mark, node.end_mark)

    @classmethod
    def create(cls, level: Level, message: str) -> ValidationResult:
        """Create a result of any level with no location."""
        if not isinstance(level, Level):
            raise TypeError(f"level must be a Level, got {type(level).__name__}")
        return cls(level, message)

    @classmethod
    def from_yaml_error(cls, exc: yaml.MarkedYAMLError) -> ValidationResult:
        """Report a YAML scanner/parser/composer failure as an error."""
        message = " ".join(part for part in (exc.context, exc.problem) if part)
        mark = exc.problem_mark or exc.context_mark
        return cls.error(message or str(exc), mark, mark)

    @property
    def is_valid(self) -> bool:
        """Return True unless this result is an error."""
        return self.level is not Level.ERROR

    @property
    def include_name(self) -> str | None:
        """Name of the innermost include this result came from, if any."""
        if not self.include_context:
            return None
        return self.include_context[0].include_name

    def with_include_context(self, include_context: Iterable[IncludeInfo]) -> ValidationResult:
        """Return a copy whose include trace is a snapshot of ``include_context``.

        Any previous trace is replaced, not extended.
        """
        return replace(self, include_context=tuple(include_context))

    def __str__(self) -> str:
        return f"{self.level}: {self.message}"


def all_valid(results: Iterable[ValidationResult]) -> bool:
    """Return True if no result is an error. Empty input is valid."""
    return all(result.is_valid for result in results)


def filter_by_severity(level: Level, results: Iterable[ValidationResult]) -> list[ValidationResult]:
    """Return the results at ``level``, in their original order."""
    return [result for result in results if result.level is level]
