"""Markup tree — the parsed form of an HTML document.

The tree is built by the markup parser and consumed only by the markup
rule walker. It is a tagged variant: ``kind`` says which fields are
meaningful (``name`` and ``attrs`` only for elements).
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

from codecatcher.domain.models.enums import MarkupNodeKind


@dataclass
class MarkupNode:
    """One parsed markup construct."""

    kind: MarkupNodeKind
    name: Optional[str] = None
    attrs: dict[str, str] = field(default_factory=dict)
    children: list[MarkupNode] = field(default_factory=list)
    offset: Optional[int] = None  # zero-based index of the opening "<"
    text: str = ""

    @property
    def is_element(self) -> bool:
        return self.kind == MarkupNodeKind.ELEMENT

    def has_attr(self, name: str) -> bool:
        return name in self.attrs

    def walk(self) -> Iterator[MarkupNode]:
        """Yield this node and its descendants in document order (pre-order)."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def iter_elements(self) -> Iterator[MarkupNode]:
        """Yield element nodes of the subtree in document order."""
        return (node for node in self.walk() if node.is_element)


def document(children: Optional[list[MarkupNode]] = None) -> MarkupNode:
    """Build an empty (or pre-populated) document root."""
    return MarkupNode(kind=MarkupNodeKind.DOCUMENT, children=children or [])


def element(
    name: str,
    attrs: Optional[dict[str, str]] = None,
    children: Optional[list[MarkupNode]] = None,
    offset: Optional[int] = None,
) -> MarkupNode:
    """Build an element node."""
    return MarkupNode(
        kind=MarkupNodeKind.ELEMENT,
        name=name.lower(),
        attrs=dict(attrs or {}),
        children=children or [],
        offset=offset,
    )
