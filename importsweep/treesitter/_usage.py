"""Identifier usage scanner: which names does a file actually mention?"""

from __future__ import annotations

from ._parsers import _node_text, parse_source

# Node types that carry a name, whatever their role (reference, declaration,
# property, type, label, JSX tag).
IDENT_NODE_TYPES = frozenset({
    "identifier",
    "type_identifier",
    "property_identifier",
    "shorthand_property_identifier",
    "shorthand_property_identifier_pattern",
    "statement_identifier",
    "private_property_identifier",
})

IMPORT_NODE_TYPES = frozenset({"import_statement"})


def usage_from_tree(root_node, *, exclude_imports: bool = True) -> frozenset[str]:
    """Collect identifier names under *root_node*.

    With *exclude_imports*, import declarations are not descended, so a name
    bound by an import only counts once something else references it.
    """
    names: set[str] = set()
    stack = [root_node]
    while stack:
        node = stack.pop()
        if exclude_imports and node.type in IMPORT_NODE_TYPES:
            continue
        if node.type in IDENT_NODE_TYPES:
            names.add(_node_text(node))
        stack.extend(node.children)
    return frozenset(names)


def collect_identifier_usage(
    text: str, grammar: str = "tsx", *, exclude_imports: bool = True
) -> frozenset[str]:
    """Parse *text* and return the set of identifier names it contains."""
    _source, tree = parse_source(text, grammar)
    return usage_from_tree(tree.root_node, exclude_imports=exclude_imports)


__all__ = ["IDENT_NODE_TYPES", "collect_identifier_usage", "usage_from_tree"]
