"""Transform driver: expand a target to files, run one pass, write back changes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from importsweep.aliases import load_alias_table
from importsweep.core.config import config_path, load_config
from importsweep.core.errors import ProjectRootNotFoundError, TargetNotFoundError
from importsweep.core.fallbacks import log_best_effort_failure, warn_skip
from importsweep.passes import PassContext, TransformPass, get_pass
from importsweep.utils import find_source_files, read_text, rel, safe_write_text

logger = logging.getLogger(__name__)

PROJECT_MARKERS = ("tsconfig.json", "jsconfig.json", "package.json", ".git")


@dataclass
class PassResult:
    """Outcome of one invocation over a target."""

    label: str
    root: Path
    files: list[str] = field(default_factory=list)
    changed: list[str] = field(default_factory=list)
    skipped: list[tuple[str, str]] = field(default_factory=list)
    dry_run: bool = False

    def summary(self) -> str:
        verb = "would change" if self.dry_run else "changed"
        text = f"{self.label} completed: {len(self.changed)} of {len(self.files)} files {verb}."
        if self.skipped:
            text += f" {len(self.skipped)} skipped."
        return text


def find_project_root(target: Path) -> Path | None:
    """Walk up from *target* to the nearest directory holding a project marker."""
    start = target if target.is_dir() else target.parent
    for candidate in (start, *start.parents):
        if any((candidate / marker).exists() for marker in PROJECT_MARKERS):
            return candidate
    return None


def collect_target_files(
    target: Path, exclusions: tuple[str, ...] = (), project_root: Path | None = None
) -> list[Path]:
    """A file target is used as-is; a directory expands to its source files.

    Exclusions are matched against paths relative to *project_root*.
    """
    if target.is_file():
        return [target]
    return find_source_files(target, exclusions=exclusions, project_root=project_root)


def run_pass(
    target: str | Path,
    pass_name: str,
    *,
    root: str | Path | None = None,
    config: dict[str, Any] | None = None,
    dry_run: bool = False,
) -> PassResult:
    """Run one pass over *target* (file or directory).

    Raises TargetNotFoundError / ProjectRootNotFoundError before any file is
    read. Per-file read/write failures are recorded in ``skipped``; files
    already written stay written.
    """
    target = Path(target).resolve()
    if not (target.is_file() or target.is_dir()):
        raise TargetNotFoundError(target)

    project_root = Path(root).resolve() if root else find_project_root(target)
    if project_root is None:
        raise ProjectRootNotFoundError(target)

    if config is None:
        config = load_config(config_path(project_root))
    transform = get_pass(pass_name)
    aliases = (
        load_alias_table(project_root, tuple(config["alias_config_files"]))
        if transform.needs_aliases
        else ()
    )
    logger.debug("%s: root=%s aliases=%d", pass_name, project_root, len(aliases))

    result = PassResult(label=transform.label, root=project_root, dry_run=dry_run)
    for filepath in collect_target_files(target, tuple(config["exclude"]), project_root):
        shown = rel(filepath, project_root)
        result.files.append(shown)
        ctx = PassContext(
            file_path=filepath,
            aliases=aliases,
            keep_prologue=bool(config["sort_keep_prologue"]),
        )
        try:
            if _process_file(filepath, transform, ctx, dry_run=dry_run):
                result.changed.append(shown)
        except (OSError, UnicodeDecodeError) as ex:
            result.skipped.append((shown, str(ex)))
            warn_skip(f"{shown}: {ex}")
            log_best_effort_failure(logger, f"apply {pass_name} to {filepath}", ex)
    return result


def _process_file(
    filepath: Path, transform: TransformPass, ctx: PassContext, *, dry_run: bool
) -> bool:
    original = read_text(filepath)
    new_text = transform.transform(original, ctx)
    if new_text == original:
        return False
    if not dry_run:
        safe_write_text(filepath, new_text)
    return True


__all__ = [
    "PROJECT_MARKERS",
    "PassResult",
    "collect_target_files",
    "find_project_root",
    "run_pass",
]
