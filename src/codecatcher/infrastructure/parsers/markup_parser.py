"""Markup parser — builds a MarkupNode tree from raw HTML text.

BeautifulSoup with the standard library ``html.parser`` tree builder is
lenient with broken markup and records ``sourceline`` / ``sourcepos``
for every tag, which this module turns into character offsets.
"""

from __future__ import annotations

import logging
import warnings

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
from bs4.element import Comment, PageElement, PreformattedString, Tag

from codecatcher.domain.errors import ParseFailure
from codecatcher.domain.models.enums import MarkupNodeKind
from codecatcher.domain.models.markup import MarkupNode
from codecatcher.domain.positions import line_starts, offset_of

logger = logging.getLogger(__name__)

_PARSER = "html.parser"


def parse_markup(text: str) -> MarkupNode:
    """Parse ``text`` into a tree rooted at a document node.

    Raises:
        ParseFailure: the underlying parser crashed.
    """
    try:
        with warnings.catch_warnings():
            # Short inputs such as "index.html" look like file names to bs4
            warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
            soup = BeautifulSoup(text, _PARSER, multi_valued_attributes=None)
    except Exception as exc:
        raise ParseFailure("markup", exc) from exc

    root = MarkupNode(kind=MarkupNodeKind.DOCUMENT)
    starts = line_starts(text)

    # Iterative pre-order copy; deeply nested documents must not hit the recursion limit
    stack: list[tuple[PageElement, MarkupNode]] = [
        (child, root) for child in reversed(list(soup.children))
    ]
    while stack:
        source, parent = stack.pop()
        node = _convert(source, starts)
        parent.children.append(node)
        if isinstance(source, Tag):
            stack.extend((child, node) for child in reversed(list(source.children)))

    logger.debug("Parsed markup into %d element(s)", sum(1 for _ in root.iter_elements()))
    return root


def _convert(source: PageElement, starts: list[int]) -> MarkupNode:
    if isinstance(source, Tag):
        offset = None
        if source.sourceline is not None:
            offset = offset_of(source.sourceline, source.sourcepos or 0, starts)
        return MarkupNode(
            kind=MarkupNodeKind.ELEMENT,
            name=source.name.lower(),
            attrs={k: _attr_text(v) for k, v in source.attrs.items()},
            offset=offset,
        )
    if isinstance(source, Comment):
        return MarkupNode(kind=MarkupNodeKind.COMMENT, text=str(source))
    if isinstance(source, PreformattedString):
        # Doctype, CData, ProcessingInstruction, Declaration
        return MarkupNode(kind=MarkupNodeKind.OTHER, text=str(source))
    return MarkupNode(kind=MarkupNodeKind.TEXT, text=str(source))


def _attr_text(value: object) -> str:
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value)
    return "" if value is None else str(value)
