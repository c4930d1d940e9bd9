"""Transformation passes and their registry.

Each pass maps (text, context) -> new text and has no side effects; the
driver decides whether anything gets written.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from importsweep.aliases import AliasTable
from importsweep.passes.alias import rewrite_imports
from importsweep.passes.prune import remove_unused_imports_from_text
from importsweep.passes.sort import sort_import_statements
from importsweep.treesitter import grammar_for_path


@dataclass(frozen=True)
class PassContext:
    """Per-file inputs a pass may need besides the text itself."""

    file_path: Path
    aliases: AliasTable = ()
    keep_prologue: bool = False

    @property
    def grammar(self) -> str:
        return grammar_for_path(self.file_path)


@dataclass(frozen=True)
class TransformPass:
    name: str
    label: str
    transform: Callable[[str, PassContext], str]
    needs_aliases: bool = False


def _alias(text: str, ctx: PassContext) -> str:
    return rewrite_imports(text, ctx.file_path, ctx.aliases, ctx.grammar)


def _sort(text: str, ctx: PassContext) -> str:
    return sort_import_statements(text, ctx.grammar, keep_prologue=ctx.keep_prologue)


def _prune(text: str, ctx: PassContext) -> str:
    return remove_unused_imports_from_text(text, ctx.grammar)


PASSES: dict[str, TransformPass] = {
    "alias-imports": TransformPass("alias-imports", "Alias Imports", _alias, needs_aliases=True),
    "sort-imports": TransformPass("sort-imports", "Sort Imports", _sort),
    "remove-unused-imports": TransformPass(
        "remove-unused-imports", "Remove Unused Imports", _prune
    ),
}


def get_pass(name: str) -> TransformPass:
    try:
        return PASSES[name]
    except KeyError:
        raise KeyError(f"Unknown pass: {name}") from None


__all__ = [
    "PASSES",
    "PassContext",
    "TransformPass",
    "get_pass",
    "remove_unused_imports_from_text",
    "rewrite_imports",
    "sort_import_statements",
]
