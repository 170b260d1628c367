"""Stylesheet tree — the parsed form of a CSS document.

Rules and at-rules own their children; declarations are leaves. Every
node carries the 1-based ``line`` and ``column`` the parser reported for
its first token.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional, Union

from codecatcher.domain.models.enums import StyleNodeKind


@dataclass(frozen=True)
class ValueToken:
    """A flattened component of a declaration value."""

    kind: str  # "dimension", "number", "percentage", "ident", "function", ...
    text: str  # numeric representation for numbers, raw text otherwise
    unit: Optional[str] = None
    value: Optional[float] = None  # numeric tokens only


@dataclass
class StyleDeclaration:
    """A single ``property: value`` pair."""

    property: str
    value: str
    important: bool = False
    line: int = 1
    column: int = 1
    value_tokens: list[ValueToken] = field(default_factory=list, repr=False, compare=False)

    kind = StyleNodeKind.DECLARATION


@dataclass
class StyleRule:
    """A qualified rule: ``selector { ... }``."""

    prelude: str
    line: int = 1
    column: int = 1
    children: list[StyleChild] = field(default_factory=list)

    kind = StyleNodeKind.RULE


@dataclass
class StyleAtRule:
    """An at-rule such as ``@media`` or ``@font-face`` (block may be empty)."""

    name: str
    prelude: str = ""
    line: int = 1
    column: int = 1
    children: list[StyleChild] = field(default_factory=list)

    kind = StyleNodeKind.AT_RULE


StyleChild = Union[StyleDeclaration, StyleRule, StyleAtRule]


@dataclass
class StyleSheet:
    """Root of a parsed stylesheet."""

    children: list[StyleChild] = field(default_factory=list)

    kind = StyleNodeKind.STYLESHEET

    def iter_declarations(self) -> Iterator[StyleDeclaration]:
        """Yield every declaration in document order, descending into blocks."""
        yield from _iter_declarations(self.children)


def _iter_declarations(children: list[StyleChild]) -> Iterator[StyleDeclaration]:
    # Explicit stack of sibling iterators; nesting depth is unbounded
    stack: list[Iterator[StyleChild]] = [iter(children)]
    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
        elif isinstance(child, StyleDeclaration):
            yield child
        else:
            stack.append(iter(child.children))
