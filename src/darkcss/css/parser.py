"""Turn CSS text into a StyleSheet rule tree using tinycss2.

Only what matching needs is kept: qualified rules with their selector
lists and declarations, and ``@media`` blocks one level deep. Other
at-rules (``@font-face``, ``@keyframes``, ``@supports`` ...) are dropped.
"""

from __future__ import annotations

import logging
import re

import tinycss2
from tinycss2 import ast

from darkcss.css.model import Declaration, MediaBlock, StyleRule, StyleSheet

__all__ = ["parse_stylesheet", "split_selectors"]

logger = logging.getLogger(__name__)

_WS_RE = re.compile(r"\s+")


def _serialize(nodes: list[ast.Node]) -> str:
    # serialize() separates some token pairs (`n` `+3`) with an empty comment.
    return _WS_RE.sub(" ", tinycss2.serialize(nodes).replace("/**/", "")).strip()


def split_selectors(prelude: list[ast.Node]) -> tuple[str, ...]:
    """Split a rule prelude on top-level commas.

    Commas inside functional notation such as ``:not(a, b)`` belong to a
    nested block and are left alone.
    """
    selectors: list[str] = []
    current: list[ast.Node] = []
    for token in prelude:
        if token.type == "comment":
            continue
        if token.type == "literal" and token.value == ",":
            selectors.append(_serialize(current))
            current = []
        else:
            current.append(token)
    selectors.append(_serialize(current))
    return tuple(s for s in selectors if s)


def _parse_declarations(content: list[ast.Node] | None) -> tuple[Declaration, ...]:
    declarations: list[Declaration] = []
    if not content:
        return ()
    for node in tinycss2.parse_declaration_list(content, skip_comments=True, skip_whitespace=True):
        if node.type != "declaration":
            continue
        value = tinycss2.serialize(node.value).strip()
        declarations.append(Declaration(node.lower_name, value, bool(node.important)))
    return tuple(declarations)


def _style_rule(node: ast.QualifiedRule) -> StyleRule:
    return StyleRule(
        selectors=split_selectors(node.prelude),
        declarations=_parse_declarations(node.content),
    )


def _media_block(node: ast.AtRule) -> MediaBlock:
    rules: list[StyleRule] = []
    if node.content is not None:
        for inner in tinycss2.parse_rule_list(node.content, skip_comments=True, skip_whitespace=True):
            if inner.type == "qualified-rule":
                rules.append(_style_rule(inner))
    return MediaBlock(query=_serialize(node.prelude), rules=tuple(rules))


def parse_stylesheet(source: str) -> StyleSheet:
    """Parse CSS text into a StyleSheet, preserving source order."""
    items: list[StyleRule | MediaBlock] = []
    errors = 0
    for node in tinycss2.parse_stylesheet(source, skip_comments=True, skip_whitespace=True):
        if node.type == "qualified-rule":
            items.append(_style_rule(node))
        elif node.type == "at-rule" and node.lower_at_keyword == "media":
            items.append(_media_block(node))
        elif node.type == "error":
            errors += 1
    if errors:
        logger.debug("Skipped %d malformed constructs while parsing stylesheet", errors)
    return StyleSheet(items=tuple(items))
