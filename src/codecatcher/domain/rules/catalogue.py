"""Rule catalogue — the fixed set of lint rules as data.

Each rule is a predicate plus the issue text it produces. The analyzers
walk their trees and apply these tables in order; nothing here knows
how a tree was parsed.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from codecatcher.domain.models.enums import IssueKind, StyleProblem
from codecatcher.domain.models.markup import MarkupNode
from codecatcher.domain.models.stylesheet import StyleDeclaration


# ---------------------------------------------------------------------------
# Value Objects (frozen dataclasses)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MarkupRule:
    """An element-scoped markup rule."""

    rule_id: str
    tag: Optional[str]  # None = every element
    issue: IssueKind
    solution: str
    predicate: Callable[[MarkupNode], bool]

    def applies_to(self, node: MarkupNode) -> bool:
        if not node.is_element:
            return False
        if self.tag is not None and (node.name or "").lower() != self.tag:
            return False
        return self.predicate(node)


@dataclass(frozen=True)
class StyleRule:
    """A declaration-scoped stylesheet rule."""

    rule_id: str
    problem: StyleProblem
    solution: str
    predicate: Callable[[StyleDeclaration], bool]

    def applies_to(self, decl: StyleDeclaration) -> bool:
        return self.predicate(decl)


# ---------------------------------------------------------------------------
# Predicate builders
# ---------------------------------------------------------------------------


def missing(*attrs: str) -> Callable[[MarkupNode], bool]:
    """Fire when the element has none of ``attrs``."""

    def _check(node: MarkupNode) -> bool:
        return not any(node.has_attr(a) for a in attrs)

    return _check


def present(attr: str) -> Callable[[MarkupNode], bool]:
    """Fire when the element carries ``attr``."""

    def _check(node: MarkupNode) -> bool:
        return node.has_attr(attr)

    return _check


def property_prefix(prefix: str) -> Callable[[StyleDeclaration], bool]:
    def _check(decl: StyleDeclaration) -> bool:
        return decl.property.lower().startswith(prefix)

    return _check


def has_zero_px(decl: StyleDeclaration) -> bool:
    """True when a value token is a zero dimension in ``px`` (``0px``, ``-0px``, ``0.0px``)."""
    return any(
        tok.kind == "dimension" and tok.value == 0 and (tok.unit or "").lower() == "px"
        for tok in decl.value_tokens
    )


def is_important(decl: StyleDeclaration) -> bool:
    return decl.important


# ---------------------------------------------------------------------------
# Markup rules (evaluated in this order at every element)
# ---------------------------------------------------------------------------

MARKUP_RULES: tuple[MarkupRule, ...] = (
    MarkupRule(
        "img-alt",
        "img",
        IssueKind.MISSING_ALT,
        'Add alt="..." attribute in <img>',
        missing("alt"),
    ),
    MarkupRule(
        "html-lang",
        "html",
        IssueKind.MISSING_LANG,
        'Add lang="en" in <html>',
        missing("lang"),
    ),
    MarkupRule(
        "a-href",
        "a",
        IssueKind.MISSING_HREF,
        'Add href="..." in <a>',
        missing("href"),
    ),
    # html.parser lower-cases attribute names, so a literal htmlFor arrives as htmlfor
    MarkupRule(
        "label-for",
        "label",
        IssueKind.MISSING_HTML_FOR,
        'Add htmlFor="..." in <label>',
        missing("for", "htmlFor", "htmlfor"),
    ),
    MarkupRule(
        "button-type",
        "button",
        IssueKind.MISSING_TYPE,
        'Add type="button" (or "submit"/"reset") in <button>',
        missing("type"),
    ),
    MarkupRule(
        "input-name",
        "input",
        IssueKind.MISSING_NAME,
        'Add name="..." in <input>',
        missing("name"),
    ),
    MarkupRule(
        "input-type",
        "input",
        IssueKind.MISSING_TYPE,
        'Add type="text" (or another input type) in <input>',
        missing("type"),
    ),
    MarkupRule(
        "textarea-name",
        "textarea",
        IssueKind.MISSING_NAME,
        'Add name="..." in <textarea>',
        missing("name"),
    ),
    MarkupRule(
        "inline-style",
        None,
        IssueKind.INLINE_STYLE,
        "Move the inline style into the stylesheet and use a class",
        present("style"),
    ),
)

CLOSING_TAG_RULE_ID = "closing-tag"

# Container tags whose opening/closing counts are compared in raw text
CLOSING_TAGS: tuple[str, ...] = (
    "div",
    "section",
    "article",
    "header",
    "footer",
    "nav",
    "main",
    "aside",
    "p",
    "span",
    "a",
    "ul",
    "ol",
    "li",
    "table",
    "tr",
    "td",
    "th",
    "form",
    "button",
    "label",
    "textarea",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
)


def closing_tag_solution(tag: str) -> str:
    return f"Add the missing </{tag}> closing tag"


# ---------------------------------------------------------------------------
# Stylesheet rules (evaluated in this order at every declaration)
# ---------------------------------------------------------------------------

STYLE_RULES: tuple[StyleRule, ...] = (
    StyleRule(
        "zero-px",
        StyleProblem.ZERO_PX,
        "Replace '0px' with '0'",
        has_zero_px,
    ),
    StyleRule(
        "font-shorthand",
        StyleProblem.FONT_SHORTHAND,
        "Use full 'font: ...' shorthand",
        property_prefix("font-"),
    ),
    StyleRule(
        "background-shorthand",
        StyleProblem.BACKGROUND_SHORTHAND,
        "Use 'background: ...' shorthand",
        property_prefix("background-"),
    ),
    StyleRule(
        "important",
        StyleProblem.IMPORTANT,
        "Remove '!important' if possible",
        is_important,
    ),
)

MARKUP_RULE_IDS: frozenset[str] = frozenset(
    [r.rule_id for r in MARKUP_RULES] + [CLOSING_TAG_RULE_ID]
)
STYLE_RULE_IDS: frozenset[str] = frozenset(r.rule_id for r in STYLE_RULES)
