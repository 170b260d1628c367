"""Tests for the rule catalogue, one rule at a time."""

import pytest

from codecatcher.domain.models.enums import IssueKind, MarkupNodeKind, StyleProblem
from codecatcher.domain.models.markup import MarkupNode, element
from codecatcher.domain.models.stylesheet import StyleDeclaration, ValueToken
from codecatcher.domain.rules.catalogue import (
    CLOSING_TAGS,
    MARKUP_RULE_IDS,
    MARKUP_RULES,
    STYLE_RULE_IDS,
    STYLE_RULES,
    has_zero_px,
)

_MARKUP = {r.rule_id: r for r in MARKUP_RULES}
_STYLE = {r.rule_id: r for r in STYLE_RULES}


def _decl(prop="margin", tokens=(), important=False):
    return StyleDeclaration(
        property=prop, value="", important=important, value_tokens=list(tokens)
    )


# ---------------------------------------------------------------------------
# Markup rules
# ---------------------------------------------------------------------------


class TestMarkupRules:
    def test_catalogue_order(self):
        assert [r.rule_id for r in MARKUP_RULES] == [
            "img-alt",
            "html-lang",
            "a-href",
            "label-for",
            "button-type",
            "input-name",
            "input-type",
            "textarea-name",
            "inline-style",
        ]

    @pytest.mark.parametrize(
        "rule_id, tag, attr, kind",
        [
            ("img-alt", "img", "alt", IssueKind.MISSING_ALT),
            ("html-lang", "html", "lang", IssueKind.MISSING_LANG),
            ("a-href", "a", "href", IssueKind.MISSING_HREF),
            ("button-type", "button", "type", IssueKind.MISSING_TYPE),
            ("input-name", "input", "name", IssueKind.MISSING_NAME),
            ("input-type", "input", "type", IssueKind.MISSING_TYPE),
            ("textarea-name", "textarea", "name", IssueKind.MISSING_NAME),
        ],
    )
    def test_missing_attribute_rules(self, rule_id, tag, attr, kind):
        rule = _MARKUP[rule_id]
        assert rule.issue is kind
        assert rule.applies_to(element(tag))
        assert not rule.applies_to(element(tag, {attr: "x"}))

    def test_empty_attribute_counts_as_present(self):
        assert not _MARKUP["img-alt"].applies_to(element("img", {"alt": ""}))

    def test_tag_match_is_case_insensitive(self):
        node = MarkupNode(kind=MarkupNodeKind.ELEMENT, name="IMG")
        assert _MARKUP["img-alt"].applies_to(node)

    def test_rule_ignores_other_tags(self):
        assert not _MARKUP["img-alt"].applies_to(element("div"))

    def test_rule_ignores_non_elements(self):
        text = MarkupNode(kind=MarkupNodeKind.TEXT, text="img")
        assert not _MARKUP["inline-style"].applies_to(text)

    @pytest.mark.parametrize("attr", ["for", "htmlFor", "htmlfor"])
    def test_label_accepts_either_for_attribute(self, attr):
        assert not _MARKUP["label-for"].applies_to(element("label", {attr: "email"}))

    def test_label_without_for(self):
        assert _MARKUP["label-for"].applies_to(element("label"))

    def test_inline_style_on_any_element(self):
        rule = _MARKUP["inline-style"]
        assert rule.tag is None
        assert rule.applies_to(element("span", {"style": "color: red"}))
        assert rule.applies_to(element("section", {"style": ""}))
        assert not rule.applies_to(element("span"))

    def test_every_rule_has_a_solution(self):
        assert all(r.solution for r in MARKUP_RULES)

    def test_rule_ids_include_closing_tag(self):
        assert "closing-tag" in MARKUP_RULE_IDS

    def test_closing_tags_cover_headings(self):
        assert {"h1", "h2", "h3", "h4", "h5", "h6"} <= set(CLOSING_TAGS)
        assert {"div", "section", "p", "ul", "li"} <= set(CLOSING_TAGS)


# ---------------------------------------------------------------------------
# Stylesheet rules
# ---------------------------------------------------------------------------


class TestStyleRules:
    def test_catalogue_order(self):
        assert [r.rule_id for r in STYLE_RULES] == [
            "zero-px",
            "font-shorthand",
            "background-shorthand",
            "important",
        ]
        assert STYLE_RULE_IDS == set(_STYLE)

    def test_zero_px_token(self):
        assert has_zero_px(_decl(tokens=[ValueToken("dimension", "0", "px", 0)]))

    def test_zero_px_unit_case(self):
        assert has_zero_px(_decl(tokens=[ValueToken("dimension", "0", "PX", 0)]))

    @pytest.mark.parametrize("text", ["-0", "+0", "0.0"])
    def test_zero_px_signed_and_decimal(self, text):
        assert has_zero_px(_decl(tokens=[ValueToken("dimension", text, "px", 0)]))

    @pytest.mark.parametrize(
        "token",
        [
            ValueToken("dimension", "10", "px", 10),
            ValueToken("dimension", "0", "em", 0),
            ValueToken("number", "0", None, 0),
            ValueToken("string", "'0px'"),
        ],
    )
    def test_zero_px_needs_a_zero_px_dimension(self, token):
        assert not has_zero_px(_decl(tokens=[token]))

    def test_font_prefix(self):
        rule = _STYLE["font-shorthand"]
        assert rule.problem is StyleProblem.FONT_SHORTHAND
        assert rule.applies_to(_decl("font-size"))
        assert rule.applies_to(_decl("Font-Weight"))
        assert not rule.applies_to(_decl("font"))

    def test_background_prefix(self):
        rule = _STYLE["background-shorthand"]
        assert rule.applies_to(_decl("background-color"))
        assert not rule.applies_to(_decl("background"))

    def test_important(self):
        rule = _STYLE["important"]
        assert rule.applies_to(_decl(important=True))
        assert not rule.applies_to(_decl())
