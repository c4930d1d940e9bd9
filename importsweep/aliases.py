"""Path-alias table (tsconfig/jsconfig `compilerOptions.paths`) and resolver."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from importsweep.core.fallbacks import log_best_effort_failure

ALIAS_CONFIG_FILES = ("tsconfig.json", "jsconfig.json")
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AliasEntry:
    """One alias: the declared prefix (wildcard stripped) and its absolute target."""

    prefix: str
    target: str


AliasTable = tuple[AliasEntry, ...]


# ── Table builder ──────────────────────────────────────────


def load_alias_table(
    project_root: str | Path, config_names: tuple[str, ...] | list[str] = ALIAS_CONFIG_FILES
) -> AliasTable:
    """Build the alias table for a project root.

    The first existing config among *config_names* is used. A missing or
    unreadable config, or one without `paths`, yields an empty table.
    """
    root = Path(project_root).resolve()
    for name in config_names:
        config_file = root / name
        if not config_file.is_file():
            continue
        data = _read_json(config_file)
        if data is None:
            return ()
        table = extract_alias_table(data, root)
        if table:
            return table
        extended = _extended_config(data, config_file)
        if extended is not None:
            parent, parent_dir = extended
            return extract_alias_table(parent, parent_dir)
        return ()
    return ()


def _read_json(config_file: Path) -> dict | None:
    try:
        data = json.loads(config_file.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
        log_best_effort_failure(logger, f"parse alias config {config_file}", exc)
        return None
    if not isinstance(data, dict):
        log_best_effort_failure(
            logger, f"parse alias config {config_file}", ValueError("top level is not an object")
        )
        return None
    return data


def _extended_config(data: dict, config_file: Path) -> tuple[dict, Path] | None:
    """Load a relative `extends` target once; package presets are ignored.

    Returns the parent config and the directory its paths resolve against.
    """
    extends = data.get("extends")
    if not isinstance(extends, str) or not extends.startswith("."):
        return None
    parent_path = (config_file.parent / extends).resolve()
    if not parent_path.is_file() and parent_path.suffix != ".json":
        parent_path = parent_path.with_name(parent_path.name + ".json")
    if not parent_path.is_file():
        return None
    parent = _read_json(parent_path)
    if parent is None:
        return None
    return parent, parent_path.parent


def extract_alias_table(data: dict, base_dir: Path) -> AliasTable:
    """Turn a parsed config into an AliasTable (declaration order kept)."""
    compiler_options = data.get("compilerOptions")
    if not isinstance(compiler_options, dict):
        return ()
    paths = compiler_options.get("paths")
    if not isinstance(paths, dict):
        return ()

    base_url = compiler_options.get("baseUrl", ".")
    if not isinstance(base_url, str):
        base_url = "."

    entries: list[AliasEntry] = []
    for alias, targets in paths.items():
        if not isinstance(targets, list) or not targets:
            continue
        # Only the first target counts.
        target = targets[0]
        if not isinstance(target, str):
            continue
        target_dir = os.path.normpath(
            os.path.join(str(base_dir), base_url, target.removesuffix("*"))
        )
        entries.append(AliasEntry(prefix=alias.removesuffix("*"), target=target_dir))
    return tuple(entries)


# ── Resolver ───────────────────────────────────────────────


def is_relative_specifier(specifier: str) -> bool:
    return specifier in (".", "..") or specifier.startswith(("./", "../"))


def find_alias_for_import(
    specifier: str, file_path: str | Path, aliases: AliasTable
) -> str | None:
    """Return the alias form of a relative *specifier*, or None.

    The specifier is resolved against the importing file's directory; the
    first entry (declaration order) whose target contains that path wins.
    """
    if not is_relative_specifier(specifier):
        return None
    resolved = os.path.abspath(os.path.join(os.path.dirname(str(file_path)), specifier))
    for entry in aliases:
        if resolved != entry.target and not resolved.startswith(entry.target.rstrip(os.sep) + os.sep):
            continue
        remainder = resolved[len(entry.target):].lstrip("/\\").replace("\\", "/")
        return entry.prefix + remainder
    return None


__all__ = [
    "ALIAS_CONFIG_FILES",
    "AliasEntry",
    "AliasTable",
    "extract_alias_table",
    "find_alias_for_import",
    "is_relative_specifier",
    "load_alias_table",
]
