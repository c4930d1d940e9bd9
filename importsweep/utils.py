"""Shared utilities: paths, colors, atomic writes, file discovery."""

import os
import shutil
import sys
import tempfile
from pathlib import Path

# Script/module files the passes operate on.
SOURCE_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx")

# Dependency-cache directories, always pruned during traversal.
DEFAULT_EXCLUSIONS = frozenset({"node_modules"})


# ── Atomic file writes ─────────────────────────────────────


def safe_write_text(filepath: str | Path, content: str) -> None:
    """Atomically write text to a file using temp+rename."""
    p = Path(filepath)
    p.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=p.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        if p.exists():
            shutil.copymode(p, tmp)
        os.replace(tmp, str(p))
    except BaseException:
        try:
            os.unlink(tmp)
        except OSError:
            pass
        raise


def read_text(filepath: str | Path) -> str:
    """Read a source file exactly as stored (no newline translation)."""
    with open(filepath, encoding="utf-8", newline="") as f:
        return f.read()


# ── Colors ─────────────────────────────────────────────────

COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "cyan": "\033[36m",
}


def colorize(text: str, color: str) -> str:
    if os.environ.get("NO_COLOR") is not None or not sys.stdout.isatty():
        return str(text)
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"


def rel(path: str | Path, root: str | Path) -> str:
    """Render *path* relative to *root* with forward slashes."""
    try:
        return str(Path(path).resolve().relative_to(Path(root).resolve())).replace("\\", "/")
    except ValueError:
        return os.path.relpath(str(Path(path).resolve()), str(root)).replace("\\", "/")


# ── File discovery ─────────────────────────────────────────


def matches_exclusion(rel_path: str, exclusion: str) -> bool:
    """Check if a relative path matches an exclusion pattern (path-component aware).

    "test" matches "test/foo.ts" and "src/test/bar.ts" but not "testimony.ts";
    "src/test" matches as a directory prefix.
    """
    parts = Path(rel_path).parts
    if exclusion in parts:
        return True
    if "/" in exclusion or os.sep in exclusion:
        normalized = exclusion.rstrip("/").rstrip(os.sep)
        return rel_path.startswith(normalized + "/") or rel_path.startswith(normalized + os.sep)
    return False


def _is_excluded_dir(name: str, rel_path: str, extra: tuple[str, ...]) -> bool:
    if name in DEFAULT_EXCLUSIONS:
        return True
    return any(ex == name or matches_exclusion(rel_path, ex) for ex in extra)


def find_source_files(
    path: str | Path,
    extensions: tuple[str, ...] = SOURCE_EXTENSIONS,
    exclusions: tuple[str, ...] = (),
    project_root: str | Path | None = None,
) -> list[Path]:
    """Find all files with given extensions under *path*, depth-first.

    Exclusion patterns match paths relative to *project_root* (default:
    *path* itself). Directories are pruned in place so excluded trees are
    never descended. Results are absolute paths in sorted order.
    """
    root = Path(path).resolve()
    base = Path(project_root).resolve() if project_root is not None else root
    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = os.path.relpath(dirpath, base).replace("\\", "/")
        prefix = "" if rel_dir == "." else rel_dir + "/"
        dirnames[:] = sorted(
            d for d in dirnames if not _is_excluded_dir(d, prefix + d, exclusions)
        )
        for fname in sorted(filenames):
            if not fname.endswith(extensions):
                continue
            if exclusions and any(matches_exclusion(prefix + fname, ex) for ex in exclusions):
                continue
            files.append(Path(dirpath) / fname)
    return files
