"""codecatcher — static-quality linter for HTML and CSS sources.

Public entry points::

    from codecatcher import analyze, analyze_markup, analyze_stylesheet

    report = analyze(html_text, css_text)
    report.to_dict()  # {"htmlIssues": [...], "cssIssues": [...]}
"""

from __future__ import annotations

from codecatcher.domain.models.issue import AnalysisReport, MarkupIssue, StyleIssue

__version__ = "0.1.0"


def analyze_markup(text: str) -> list[MarkupIssue]:
    """Lint markup text with the default configuration."""
    from codecatcher.bootstrap import Container

    return Container().markup_analyzer.analyze(text)


def analyze_stylesheet(text: str) -> list[StyleIssue]:
    """Lint stylesheet text with the default configuration."""
    from codecatcher.bootstrap import Container

    return Container().stylesheet_analyzer.analyze(text)


def analyze(markup: str, stylesheet: str) -> AnalysisReport:
    """Lint a markup/stylesheet pair and return both issue lists."""
    from codecatcher.bootstrap import Container

    return Container().analyze_sources().execute(markup, stylesheet)


__all__ = [
    "AnalysisReport",
    "MarkupIssue",
    "StyleIssue",
    "analyze",
    "analyze_markup",
    "analyze_stylesheet",
]
