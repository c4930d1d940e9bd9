"""Alias pass: rewrite relative import specifiers into their alias form."""

from __future__ import annotations

import logging
from pathlib import Path

from importsweep.aliases import AliasTable, find_alias_for_import, is_relative_specifier
from importsweep.passes.common import apply_edits
from importsweep.treesitter import grammar_for_path
from importsweep.treesitter._imports import find_import_statements
from importsweep.treesitter._parsers import parse_source

logger = logging.getLogger(__name__)


def rewrite_imports(
    text: str,
    file_path: str | Path,
    aliases: AliasTable,
    grammar: str | None = None,
) -> str:
    """Replace relative specifiers that fall under an alias target.

    Only the string-literal contents change; quotes, bindings, semicolons and
    whitespace are kept byte-for-byte. Multi-line statements and re-exports
    (`export ... from`) are handled.
    """
    if not aliases:
        return text
    grammar = grammar or grammar_for_path(file_path)
    source, tree = parse_source(text, grammar)
    edits = []
    for stmt in find_import_statements(tree, grammar, include_exports=True):
        if stmt.specifier is None or not is_relative_specifier(stmt.specifier):
            continue
        alias_import = find_alias_for_import(stmt.specifier, file_path, aliases)
        if alias_import is None or alias_import == stmt.specifier:
            continue
        start, end = stmt.specifier_range
        edits.append((start, end, alias_import.encode("utf-8")))
        logger.debug("%s: %s -> %s", file_path, stmt.specifier, alias_import)
    if not edits:
        return text
    return apply_edits(source, edits).decode("utf-8")


__all__ = ["rewrite_imports"]
