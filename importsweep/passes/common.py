"""Shared pass utilities: byte-range edits and whole-line statement spans."""

from __future__ import annotations

Edit = tuple[int, int, bytes]


def apply_edits(source: bytes, edits: list[Edit]) -> bytes:
    """Apply non-overlapping (start, end, replacement) edits to *source*."""
    result = source
    for start, end, replacement in sorted(edits, key=lambda e: e[0], reverse=True):
        result = result[:start] + replacement + result[end:]
    return result


def removal_span(source: bytes, start: int, end: int) -> tuple[int, int]:
    """Widen [start, end) to whole lines when nothing else shares them.

    Otherwise only the statement itself (and trailing spaces) is removed.
    """
    line_start = source.rfind(b"\n", 0, start) + 1
    line_end = source.find(b"\n", end)
    tail_end = len(source) if line_end == -1 else line_end
    if source[line_start:start].strip() or source[end:tail_end].strip():
        while end < tail_end and source[end:end + 1] in (b" ", b"\t"):
            end += 1
        return start, end
    if line_end == -1:
        # Last line: take the preceding newline instead, if any.
        return max(line_start - 1, 0), tail_end
    return line_start, line_end + 1


__all__ = ["Edit", "apply_edits", "removal_span"]
