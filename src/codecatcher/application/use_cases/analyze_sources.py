"""Use Case: Analyze Sources.

Runs the markup and stylesheet analyzers on one document pair and
combines their results. The analyzers share no state, so by default they
run side by side on a two-worker thread pool.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from codecatcher.domain.models.issue import AnalysisReport
from codecatcher.domain.ports.analyzer import MarkupAnalyzerPort, StylesheetAnalyzerPort

logger = logging.getLogger(__name__)


class AnalyzeSourcesUseCase:
    """Orchestrate linting of a markup/stylesheet pair."""

    def __init__(
        self,
        markup_analyzer: MarkupAnalyzerPort,
        stylesheet_analyzer: StylesheetAnalyzerPort,
        parallel: bool = True,
    ) -> None:
        self._markup_analyzer = markup_analyzer
        self._stylesheet_analyzer = stylesheet_analyzer
        self._parallel = parallel

    def execute(self, markup: str, stylesheet: str) -> AnalysisReport:
        """Analyze both documents.

        Args:
            markup: Raw HTML text (may be empty or malformed).
            stylesheet: Raw CSS text (may be empty or malformed).

        Returns:
            An AnalysisReport holding both issue lists in emission order.
        """
        if not self._parallel:
            return AnalysisReport(
                html_issues=self._markup_analyzer.analyze(markup),
                css_issues=self._stylesheet_analyzer.analyze(stylesheet),
            )

        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="codecatcher") as pool:
            html_future = pool.submit(self._markup_analyzer.analyze, markup)
            css_future = pool.submit(self._stylesheet_analyzer.analyze, stylesheet)
            report = AnalysisReport(
                html_issues=html_future.result(),
                css_issues=css_future.result(),
            )

        logger.debug(
            "Analysis finished: %d HTML issue(s), %d CSS issue(s)",
            len(report.html_issues),
            len(report.css_issues),
        )
        return report
