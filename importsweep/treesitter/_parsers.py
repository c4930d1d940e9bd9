"""Parser/query construction and small node helpers."""

from __future__ import annotations

import logging
from functools import lru_cache

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def _get_parser(grammar: str):
    """Get a tree-sitter parser and language for the given grammar."""
    from tree_sitter_language_pack import get_language, get_parser

    parser = get_parser(grammar)
    language = get_language(grammar)
    logger.debug("loaded tree-sitter grammar %s", grammar)
    return parser, language


@lru_cache(maxsize=32)
def _make_query(grammar: str, source: str):
    """Create (and cache) a tree-sitter Query for a grammar."""
    from tree_sitter import Query

    _parser, language = _get_parser(grammar)
    return Query(language, source)


def _run_query(query, root_node) -> list[tuple[int, dict]]:
    """Run a query and return matches."""
    from tree_sitter import QueryCursor

    cursor = QueryCursor(query)
    return cursor.matches(root_node)


def _unwrap_node(node):
    """Unwrap a capture that may be a list of nodes."""
    if isinstance(node, list):
        return node[0] if node else None
    return node


def _node_text(node) -> str:
    """Get text from a node as a str."""
    text = node.text
    if isinstance(text, bytes):
        return text.decode("utf-8", errors="replace")
    return str(text)


def parse_source(text: str, grammar: str) -> tuple[bytes, object]:
    """Parse *text*; returns (source_bytes, tree).

    Tree-sitter recovers from syntax errors, so half-edited files still
    produce a tree (with ERROR nodes) instead of raising.
    """
    parser, _language = _get_parser(grammar)
    source = text.encode("utf-8")
    return source, parser.parse(source)


__all__ = ["parse_source"]
