"""Stylesheet parser — builds a StyleSheet tree from raw CSS text.

tinycss2 never raises on malformed CSS: broken constructs come back as
``ParseError`` nodes, which are logged and skipped. Every rule and
declaration keeps the ``source_line`` / ``source_column`` of its first
token.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

import tinycss2
from tinycss2 import ast

from codecatcher.domain.errors import ParseFailure
from codecatcher.domain.models.stylesheet import (
    StyleAtRule,
    StyleChild,
    StyleDeclaration,
    StyleRule,
    StyleSheet,
    ValueToken,
)

logger = logging.getLogger(__name__)

# At-rules whose block holds rules rather than declarations
_GROUP_AT_RULES = frozenset({"media", "supports", "document", "layer", "container", "scope"})

_BLOCKS = (ast.ParenthesesBlock, ast.SquareBracketsBlock, ast.CurlyBracketsBlock)

_DONE = object()


def parse_stylesheet(text: str) -> StyleSheet:
    """Parse ``text`` into a StyleSheet.

    Raises:
        ParseFailure: tinycss2 itself crashed.
    """
    try:
        nodes = tinycss2.parse_stylesheet(text, skip_comments=True, skip_whitespace=True)
        sheet = StyleSheet(children=_convert_nodes(nodes))
    except Exception as exc:
        raise ParseFailure("stylesheet", exc) from exc
    return sheet


# ---------------------------------------------------------------------------
# Rules and at-rules
# ---------------------------------------------------------------------------


def _convert_nodes(nodes: Iterable[Any]) -> list[StyleChild]:
    top: list[StyleChild] = []

    # Explicit work stack; deeply nested blocks must not hit the recursion limit.
    # Each entry fills exactly one children list, so sibling order is kept.
    stack: list[tuple[Iterable[Any], list[StyleChild]]] = [(nodes, top)]
    while stack:
        batch, children = stack.pop()
        for node in batch:
            if isinstance(node, ast.Declaration):
                children.append(_convert_declaration(node))
            elif isinstance(node, ast.QualifiedRule):
                rule = StyleRule(
                    prelude=_serialize(node.prelude),
                    line=node.source_line,
                    column=node.source_column,
                )
                children.append(rule)
                stack.append((_block_contents(node.content), rule.children))
            elif isinstance(node, ast.AtRule):
                at_rule = StyleAtRule(
                    name=node.lower_at_keyword,
                    prelude=_serialize(node.prelude),
                    line=node.source_line,
                    column=node.source_column,
                )
                children.append(at_rule)
                if node.content is not None:  # @import, @charset, ... have no block
                    stack.append((_at_rule_contents(node), at_rule.children))
            elif isinstance(node, ast.ParseError):
                logger.debug(
                    "Skipped malformed CSS at %d:%d (%s): %s",
                    node.source_line,
                    node.source_column,
                    node.kind,
                    node.message,
                )
    return top


def _at_rule_contents(node: ast.AtRule) -> list[Any]:
    if node.lower_at_keyword in _GROUP_AT_RULES:
        return tinycss2.parse_rule_list(node.content, skip_comments=True, skip_whitespace=True)
    return _block_contents(node.content)


def _block_contents(content: list[Any]) -> list[Any]:
    """Declarations plus any nested rules of a ``{ ... }`` block."""
    return tinycss2.parse_blocks_contents(content, skip_comments=True, skip_whitespace=True)


def _serialize(tokens: list[Any]) -> str:
    """Source text of ``tokens``; empty when they nest too deeply to serialize."""
    try:
        return tinycss2.serialize(tokens).strip()
    except RecursionError:
        logger.debug("CSS component too deeply nested to serialize")
        return ""


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


def _convert_declaration(node: ast.Declaration) -> StyleDeclaration:
    return StyleDeclaration(
        property=node.name,
        value=_serialize(node.value),
        important=node.important,
        line=node.source_line,
        column=node.source_column,
        value_tokens=list(_flatten(node.value)),
    )


def _flatten(values: Iterable[Any]) -> Iterator[ValueToken]:
    """Yield value tokens, descending into functions and bracketed blocks."""
    stack: list[Iterator[Any]] = [iter(values)]
    while stack:
        tok = next(stack[-1], _DONE)
        if tok is _DONE:
            stack.pop()
            continue
        if isinstance(tok, (ast.WhitespaceToken, ast.Comment)):
            continue
        if isinstance(tok, ast.DimensionToken):
            yield ValueToken("dimension", tok.representation, tok.unit, tok.value)
        elif isinstance(tok, ast.PercentageToken):
            yield ValueToken("percentage", tok.representation, "%", tok.value)
        elif isinstance(tok, ast.NumberToken):
            yield ValueToken("number", tok.representation, None, tok.value)
        elif isinstance(tok, ast.FunctionBlock):
            yield ValueToken("function", tok.name)
            stack.append(iter(tok.arguments))
        elif isinstance(tok, _BLOCKS):
            stack.append(iter(tok.content))
        else:
            yield ValueToken(tok.type, _serialize([tok]))
