"""CSS analyzer — implements StylesheetAnalyzerPort.

Visits every declaration of the parsed stylesheet in document order and
applies each stylesheet rule of the catalogue to it. Lines come straight
from the parser.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from codecatcher.domain.errors import ParseFailure
from codecatcher.domain.models.issue import StyleIssue
from codecatcher.domain.models.stylesheet import StyleSheet
from codecatcher.domain.ports.analyzer import StylesheetAnalyzerPort
from codecatcher.domain.rules.catalogue import STYLE_RULES, StyleRule
from codecatcher.infrastructure.parsers.stylesheet_parser import parse_stylesheet

logger = logging.getLogger(__name__)


class CssStylesheetAnalyzer(StylesheetAnalyzerPort):
    """Lint CSS text against the stylesheet rule catalogue."""

    def __init__(
        self,
        rules: Iterable[StyleRule] = STYLE_RULES,
        disabled_rules: Iterable[str] = (),
        parser: Callable[[str], StyleSheet] = parse_stylesheet,
    ) -> None:
        disabled = set(disabled_rules)
        self._rules = tuple(r for r in rules if r.rule_id not in disabled)
        self._parser = parser

    def analyze(self, text: str) -> list[StyleIssue]:
        """Return declaration issues; a parser crash yields an empty list."""
        try:
            sheet = self._parser(text)
        except ParseFailure as exc:
            logger.warning("Stylesheet analysis skipped: %s", exc)
            return []

        issues: list[StyleIssue] = []
        for decl in sheet.iter_declarations():
            for rule in self._rules:
                if rule.applies_to(decl):
                    issues.append(
                        StyleIssue(
                            property=decl.property,
                            problem=rule.problem.value,
                            line=decl.line or 1,
                            solution=rule.solution,
                            rule_id=rule.rule_id,
                        )
                    )

        logger.debug("Stylesheet analysis produced %d issue(s)", len(issues))
        return issues
