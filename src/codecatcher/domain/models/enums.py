"""Enumerations shared by the domain models."""

from __future__ import annotations

from enum import Enum


class MarkupNodeKind(str, Enum):
    """Kind of a parsed markup construct."""

    DOCUMENT = "document"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    OTHER = "other"  # doctype, processing instruction, CDATA


class StyleNodeKind(str, Enum):
    """Kind of a parsed stylesheet construct."""

    STYLESHEET = "stylesheet"
    RULE = "rule"
    AT_RULE = "at-rule"
    DECLARATION = "declaration"


class IssueKind(str, Enum):
    """Human-readable label of a markup issue."""

    MISSING_ALT = "Missing alt attribute"
    MISSING_LANG = "Missing lang attribute"
    MISSING_HREF = "Missing href in anchor tag"
    MISSING_HTML_FOR = "Missing htmlFor attribute"
    MISSING_TYPE = "Missing type attribute"
    MISSING_NAME = "Missing name attribute"
    INLINE_STYLE = "Inline style detected"
    MISSING_CLOSING_TAG = "Missing closing tag"


class StyleProblem(str, Enum):
    """Human-readable label of a stylesheet issue."""

    ZERO_PX = "Use 0 instead of 0px"
    FONT_SHORTHAND = "Consider using font shorthand"
    BACKGROUND_SHORTHAND = "Consider using background shorthand"
    IMPORTANT = "Avoid using !important unless necessary"
