"""HTML analyzer — implements MarkupAnalyzerPort.

Two passes over one document:

1. **Closing-tag scan** over the raw text. Opening and closing tag
   patterns are counted per tag; a surplus of openings is reported once,
   at the first opening. This works on text because the parser silently
   closes or drops unbalanced tags.
2. **Element walk** over the parsed tree, applying every markup rule of
   the catalogue, in catalogue order, to each element in document order.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from typing import Optional, Union

from codecatcher.domain.errors import ParseFailure
from codecatcher.domain.models.enums import IssueKind
from codecatcher.domain.models.issue import MarkupIssue
from codecatcher.domain.models.markup import MarkupNode
from codecatcher.domain.ports.analyzer import MarkupAnalyzerPort
from codecatcher.domain.positions import UNKNOWN_LINE, line_of
from codecatcher.domain.rules.catalogue import (
    CLOSING_TAG_RULE_ID,
    CLOSING_TAGS,
    MARKUP_RULES,
    MarkupRule,
    closing_tag_solution,
)
from codecatcher.infrastructure.parsers.markup_parser import parse_markup

logger = logging.getLogger(__name__)


class HtmlMarkupAnalyzer(MarkupAnalyzerPort):
    """Lint HTML text against the markup rule catalogue."""

    def __init__(
        self,
        rules: Iterable[MarkupRule] = MARKUP_RULES,
        closing_tags: Iterable[str] = CLOSING_TAGS,
        disabled_rules: Iterable[str] = (),
        unknown_line: str = UNKNOWN_LINE,
        parser: Callable[[str], MarkupNode] = parse_markup,
    ) -> None:
        disabled = set(disabled_rules)
        self._rules = tuple(r for r in rules if r.rule_id not in disabled)
        self._check_closing = CLOSING_TAG_RULE_ID not in disabled
        self._closing_patterns = [
            (
                tag,
                re.compile(rf"<{re.escape(tag)}[\s>]", re.IGNORECASE),
                re.compile(rf"</{re.escape(tag)}>", re.IGNORECASE),
            )
            for tag in closing_tags
        ]
        self._unknown_line = unknown_line
        self._parser = parser

    def analyze(self, text: str) -> list[MarkupIssue]:
        """Return closing-tag issues followed by element issues.

        A crash of the parsing library yields an empty list.
        """
        closing_issues = self._check_closing_tags(text) if self._check_closing else []

        try:
            root = self._parser(text)
        except ParseFailure as exc:
            logger.warning("Markup analysis skipped: %s", exc)
            return []

        issues = closing_issues + self._walk(root, text)
        logger.debug("Markup analysis produced %d issue(s)", len(issues))
        return issues

    # ------------------------------------------------------------------
    # Closing-tag scan
    # ------------------------------------------------------------------

    def _check_closing_tags(self, text: str) -> list[MarkupIssue]:
        issues: list[MarkupIssue] = []
        for tag, opening, closing in self._closing_patterns:
            first = opening.search(text)
            if first is None:
                continue
            opens = len(opening.findall(text))
            closes = len(closing.findall(text))
            if opens > closes:
                issues.append(
                    MarkupIssue(
                        type=IssueKind.MISSING_CLOSING_TAG.value,
                        tag=f"<{tag}>",
                        line=line_of(first.start(), text),
                        solution=closing_tag_solution(tag),
                        rule_id=CLOSING_TAG_RULE_ID,
                    )
                )
        return issues

    # ------------------------------------------------------------------
    # Element walk
    # ------------------------------------------------------------------

    def _walk(self, root: MarkupNode, text: str) -> list[MarkupIssue]:
        issues: list[MarkupIssue] = []
        for node in root.iter_elements():
            line: Optional[Union[int, str]] = None
            for rule in self._rules:
                if not rule.applies_to(node):
                    continue
                if line is None:
                    line = self._element_line(node, text)
                issues.append(
                    MarkupIssue(
                        type=rule.issue.value,
                        tag=f"<{node.name}>",
                        line=line,
                        solution=rule.solution,
                        rule_id=rule.rule_id,
                    )
                )
        return issues

    def _element_line(self, node: MarkupNode, text: str) -> Union[int, str]:
        """Line of the element's opening tag.

        Without a recorded offset the first ``<name`` in the text is used,
        which may belong to an earlier element of the same name.
        """
        offset = node.offset
        if offset is None and node.name:
            match = re.search(rf"<{re.escape(node.name)}", text, re.IGNORECASE)
            offset = match.start() if match else None
        return line_of(offset, text, default=self._unknown_line)
