"""Locate import declarations and their parts as syntax-tree byte ranges."""

from __future__ import annotations

from dataclasses import dataclass

from ._parsers import _make_query, _node_text, _run_query, _unwrap_node

# Top-level imports plus re-exports that carry a module specifier.
STATEMENT_QUERY = """
    (program (import_statement) @statement)
    (program (export_statement source: (string)) @statement)
"""


@dataclass(frozen=True)
class ImportSpecifier:
    """One entry of a `{ ... }` group."""

    local: str
    text: str


@dataclass(frozen=True)
class ImportStatement:
    """An import (or re-export) declaration located in a parsed file.

    Byte offsets index the UTF-8 encoded source. ``specifier_range`` covers
    the string-literal contents only (quotes excluded). ``named`` is None
    when the statement has no brace group.
    """

    start_byte: int
    end_byte: int
    start_row: int
    end_row: int
    is_export: bool
    has_error: bool
    specifier: str | None = None
    specifier_range: tuple[int, int] | None = None
    clause_range: tuple[int, int] | None = None
    default: str | None = None
    namespace: str | None = None
    namespace_text: str | None = None
    named: tuple[ImportSpecifier, ...] | None = None

    @property
    def bindings(self) -> list[str]:
        """Local names introduced by the statement, in source order."""
        names = []
        if self.default:
            names.append(self.default)
        if self.namespace:
            names.append(self.namespace)
        names.extend(spec.local for spec in self.named or ())
        return names


def _string_contents(string_node) -> tuple[str, tuple[int, int]]:
    start = string_node.start_byte + 1
    end = string_node.end_byte - 1
    text = _node_text(string_node)[1:-1]
    return text, (start, end)


def _read_named_imports(named_node) -> tuple[ImportSpecifier, ...]:
    specs = []
    for child in named_node.named_children:
        if child.type != "import_specifier":
            continue
        alias = child.child_by_field_name("alias")
        name = child.child_by_field_name("name")
        local_node = alias if alias is not None else name
        if local_node is None:
            continue
        specs.append(ImportSpecifier(local=_node_text(local_node), text=_node_text(child)))
    return tuple(specs)


def _build_statement(node) -> ImportStatement:
    fields: dict = {}
    source = node.child_by_field_name("source")
    if source is not None and source.type == "string":
        fields["specifier"], fields["specifier_range"] = _string_contents(source)

    for child in node.named_children:
        if child.type != "import_clause":
            continue
        fields["clause_range"] = (child.start_byte, child.end_byte)
        for part in child.named_children:
            if part.type == "identifier":
                fields["default"] = _node_text(part)
            elif part.type == "namespace_import":
                idents = [n for n in part.named_children if n.type == "identifier"]
                if idents:
                    fields["namespace"] = _node_text(idents[0])
                    fields["namespace_text"] = _node_text(part)
            elif part.type == "named_imports":
                fields["named"] = _read_named_imports(part)

    return ImportStatement(
        start_byte=node.start_byte,
        end_byte=node.end_byte,
        start_row=node.start_point[0],
        end_row=node.end_point[0],
        is_export=node.type == "export_statement",
        has_error=node.has_error,
        **fields,
    )


def find_import_statements(tree, grammar: str, *, include_exports: bool = False) -> list[ImportStatement]:
    """Return top-level import statements in source order.

    Re-exports (`export ... from '...'`) are included when *include_exports*.
    """
    query = _make_query(grammar, STATEMENT_QUERY)
    seen: set[int] = set()
    statements: list[ImportStatement] = []
    for _pattern_idx, captures in _run_query(query, tree.root_node):
        node = _unwrap_node(captures.get("statement"))
        if node is None or node.start_byte in seen:
            continue
        if node.type == "export_statement" and not include_exports:
            continue
        seen.add(node.start_byte)
        statements.append(_build_statement(node))
    statements.sort(key=lambda s: s.start_byte)
    return statements


__all__ = ["ImportSpecifier", "ImportStatement", "STATEMENT_QUERY", "find_import_statements"]
