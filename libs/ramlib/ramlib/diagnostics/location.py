"""Source positions for validation results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import yaml


class Mark(Protocol):
    """Anything that locates a point in a document. ``yaml.Mark`` qualifies."""

    line: int
    column: int
    index: int


@dataclass(frozen=True)
class SourceMark:
    """A position in a YAML document."""

    line: int  # 0-indexed
    column: int  # 0-indexed
    index: int  # character offset
    name: str | None = None

    @classmethod
    def from_yaml(cls, mark: yaml.Mark) -> SourceMark:
        """Copy the position out of a PyYAML mark, dropping its buffer."""
        return cls(mark.line, mark.column, mark.index, mark.name)

    def __str__(self) -> str:
        pos = f"{self.line + 1}:{self.column + 1}"
        return f"{self.name}:{pos}" if self.name else pos
