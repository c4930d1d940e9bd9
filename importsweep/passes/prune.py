"""Prune pass: drop import bindings that the rest of the file never mentions."""

from __future__ import annotations

import logging
from collections.abc import Set

from importsweep.passes.common import apply_edits, removal_span
from importsweep.treesitter._imports import ImportStatement, find_import_statements
from importsweep.treesitter._parsers import parse_source
from importsweep.treesitter._usage import usage_from_tree

logger = logging.getLogger(__name__)


def _rebuild_clause(
    stmt: ImportStatement, usage: Set[str]
) -> tuple[bool, str | None]:
    """Return (changed, new clause text); clause text is None to drop the statement."""
    bindings = stmt.bindings
    kept = [name for name in bindings if name in usage]
    if not kept:
        return True, None
    if len(kept) == len(bindings):
        return False, None

    default = stmt.default if stmt.default in usage else None
    namespace = stmt.namespace_text if stmt.namespace in usage else None
    named = [spec for spec in stmt.named or () if spec.local in usage]
    parts = [part for part in (default, namespace) if part]
    if named:
        parts.append("{ " + ", ".join(spec.text for spec in named) + " }")
    return True, ", ".join(parts)


def remove_unused_imports_from_text(
    text: str, grammar: str = "tsx", usage: Set[str] | None = None
) -> str:
    """Remove import bindings not found in *usage*.

    *usage* defaults to the identifiers of the file outside its import
    declarations. Statements left without bindings are deleted (with their
    lines when nothing else shares them); otherwise only the import clause is
    rewritten. Side-effect imports, `import x = require()` and statements
    with syntax errors are left alone.
    """
    source, tree = parse_source(text, grammar)
    if usage is None:
        usage = usage_from_tree(tree.root_node)

    edits = []
    for stmt in find_import_statements(tree, grammar):
        if stmt.has_error or stmt.clause_range is None:
            continue
        changed, clause = _rebuild_clause(stmt, usage)
        if not changed:
            continue
        if clause is None:
            start, end = removal_span(source, stmt.start_byte, stmt.end_byte)
            edits.append((start, end, b""))
            logger.debug("dropping unused import of %s", stmt.specifier)
        else:
            start, end = stmt.clause_range
            edits.append((start, end, clause.encode("utf-8")))
    if not edits:
        return text
    return apply_edits(source, edits).decode("utf-8")


__all__ = ["remove_unused_imports_from_text"]
