"""Sort pass: group import declarations into blocks and order them by source."""

from __future__ import annotations

import re
import unicodedata

from importsweep.treesitter._imports import find_import_statements
from importsweep.treesitter._parsers import parse_source

_FROM_SPECIFIER_RE = re.compile(r"""from\s+['"](.*?)['"]""")

# Root-locale (CLDR) order of ASCII punctuation; all of it sorts before
# other symbols, digits and letters.
_PUNCTUATION_ORDER = "_-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~$"


def import_sort_key(block: str) -> str:
    """Module specifier of the first `from '...'` in *block*, else ""."""
    match = _FROM_SPECIFIER_RE.search(block)
    return match.group(1) if match else ""


def _char_weight(base: str) -> tuple[int, int]:
    if base.isspace():
        return 0, ord(base)
    if base in _PUNCTUATION_ORDER:
        return 1, _PUNCTUATION_ORDER.index(base)
    if base.isdigit():
        return 3, ord(base)
    if base.isalpha():
        return 4, ord(base.lower())
    return 2, ord(base)


def collation_key(value: str) -> tuple:
    """Sort key following root-locale collation, as ``localeCompare`` does.

    Primary level ignores case and accents and puts punctuation before
    digits before letters; accents break ties next, then case (lowercase
    first). The raw string is the final tie-breaker.
    """
    primary = []
    secondary = []
    tertiary = []
    for ch in value:
        decomposed = unicodedata.normalize("NFD", ch)
        base = decomposed[0]
        primary.append(_char_weight(base))
        secondary.append(decomposed[1:])
        tertiary.append(base != base.lower())
    return tuple(primary), tuple(secondary), tuple(tertiary), value


def _block_row_spans(text: str, grammar: str) -> list[tuple[int, int]]:
    """Row ranges (inclusive) covered by top-level import declarations.

    A declaration only counts when it starts its line; declarations whose
    ranges touch are merged into one block.
    """
    source, tree = parse_source(text, grammar)
    spans: list[tuple[int, int]] = []
    for stmt in find_import_statements(tree, grammar):
        line_start = source.rfind(b"\n", 0, stmt.start_byte) + 1
        if source[line_start:stmt.start_byte].strip():
            continue
        if spans and stmt.start_row <= spans[-1][1]:
            spans[-1] = (spans[-1][0], max(spans[-1][1], stmt.end_row))
            continue
        spans.append((stmt.start_row, stmt.end_row))
    return spans


def sort_import_statements(
    text: str, grammar: str = "tsx", *, keep_prologue: bool = False
) -> str:
    """Move all import blocks to the top, ordered by module specifier.

    Lines inside a block never change order; all other lines keep their
    relative order after the imports. One blank line separates the two groups
    unless the remaining content already starts with one. With
    *keep_prologue*, lines before the first import stay above the imports.
    CRLF files keep CRLF line endings throughout.
    """
    spans = _block_row_spans(text, grammar)
    if not spans:
        return text

    lines = text.split("\n")
    covered: set[int] = set()
    blocks: list[list[str]] = []
    for start, end in spans:
        covered.update(range(start, end + 1))
        blocks.append(lines[start:end + 1])

    prologue: list[str] = []
    other_lines: list[str] = []
    first_import_row = spans[0][0]
    for idx, line in enumerate(lines):
        if idx in covered:
            continue
        if keep_prologue and idx < first_import_row:
            prologue.append(line)
        else:
            other_lines.append(line)

    blocks.sort(key=lambda block: collation_key(import_sort_key("\n".join(block))))

    separator = [""] if other_lines and other_lines[0].strip() else []
    result = prologue + [line for block in blocks for line in block] + separator + other_lines
    if "\r\n" in text:
        # Lines split on "\n" keep their "\r"; the moved last line and the
        # separator need one, the new last line must not carry one.
        result = [line.removesuffix("\r") + "\r" for line in result[:-1]] + [
            result[-1].removesuffix("\r")
        ]
    return "\n".join(result)


__all__ = ["collation_key", "import_sort_key", "sort_import_statements"]
