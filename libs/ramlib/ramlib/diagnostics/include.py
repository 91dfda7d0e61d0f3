"""Include frames recorded while a document is composed from fragments."""

from __future__ import annotations

from dataclasses import dataclass

import yaml


@dataclass(frozen=True)
class IncludeInfo:
    """One level of ``!include`` nesting."""

    include_name: str
    line: int | None = None
    start_column: int | None = None
    end_column: int | None = None

    @classmethod
    def from_node(cls, node: yaml.ScalarNode) -> IncludeInfo:
        """Build a frame from the composed ``!include`` scalar naming the resource."""
        return cls(
            include_name=node.value,
            line=node.start_mark.line,
            start_column=node.start_mark.column,
            end_column=node.end_mark.column,
        )

    def __str__(self) -> str:
        if self.line is None:
            return self.include_name
        return f"{self.include_name} (line {self.line + 1})"
