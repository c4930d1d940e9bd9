"""Tree-sitter integration: grammars, parsing, import and identifier extraction.

Install with: pip install tree-sitter-language-pack
"""

from __future__ import annotations

from pathlib import Path

# Grammar per source extension. Plain JS files (JSX included) use the
# javascript grammar; .ts uses typescript so `<T>x` casts parse correctly.
GRAMMAR_BY_EXTENSION: dict[str, str] = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".tsx": "tsx",
}

DEFAULT_GRAMMAR = "tsx"


def grammar_for_path(path: str | Path | None) -> str:
    """Pick the grammar for a file path, falling back to tsx."""
    if path is None:
        return DEFAULT_GRAMMAR
    return GRAMMAR_BY_EXTENSION.get(Path(path).suffix.lower(), DEFAULT_GRAMMAR)


__all__ = [
    "DEFAULT_GRAMMAR",
    "GRAMMAR_BY_EXTENSION",
    "grammar_for_path",
]
