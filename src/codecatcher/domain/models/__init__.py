"""Domain models — public API."""

from codecatcher.domain.models.enums import (
    IssueKind,
    MarkupNodeKind,
    StyleNodeKind,
    StyleProblem,
)
from codecatcher.domain.models.issue import AnalysisReport, MarkupIssue, StyleIssue
from codecatcher.domain.models.markup import MarkupNode
from codecatcher.domain.models.stylesheet import (
    StyleAtRule,
    StyleDeclaration,
    StyleRule,
    StyleSheet,
    ValueToken,
)

__all__ = [
    # Enums
    "IssueKind",
    "MarkupNodeKind",
    "StyleNodeKind",
    "StyleProblem",
    # Issues
    "AnalysisReport",
    "MarkupIssue",
    "StyleIssue",
    # Trees
    "MarkupNode",
    "StyleAtRule",
    "StyleDeclaration",
    "StyleRule",
    "StyleSheet",
    "ValueToken",
]
