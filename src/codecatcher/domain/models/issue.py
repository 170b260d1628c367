"""Issue records — the unit of output of both analyzers.

Issues are immutable and kept in emission order; reports never sort them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

Line = Union[int, str]  # str only for the "Unknown" sentinel


@dataclass(frozen=True)
class MarkupIssue:
    """A finding in the markup document."""

    type: str
    tag: str
    line: Line
    solution: str
    rule_id: str = field(default="", compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "tag": self.tag, "line": self.line, "solution": self.solution}


@dataclass(frozen=True)
class StyleIssue:
    """A finding in the stylesheet document."""

    property: str
    problem: str
    line: Line
    solution: str
    rule_id: str = field(default="", compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "property": self.property,
            "problem": self.problem,
            "line": self.line,
            "solution": self.solution,
        }


@dataclass
class AnalysisReport:
    """Both issue lists of one analysis call."""

    html_issues: list[MarkupIssue] = field(default_factory=list)
    css_issues: list[StyleIssue] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.html_issues) + len(self.css_issues)

    @property
    def is_clean(self) -> bool:
        return self.total == 0

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Return the ``{htmlIssues, cssIssues}`` JSON shape."""
        return {
            "htmlIssues": [i.to_dict() for i in self.html_issues],
            "cssIssues": [i.to_dict() for i in self.css_issues],
        }
