"""Project tool config (.importsweep/config.json)."""

from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from importsweep.core.fallbacks import log_best_effort_failure
from importsweep.utils import safe_write_text

CONFIG_DIR = ".importsweep"
CONFIG_NAME = "config.json"
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfigKey:
    type: type
    default: object
    description: str


CONFIG_SCHEMA: dict[str, ConfigKey] = {
    "exclude": ConfigKey(list, [], "Path patterns to skip during directory discovery"),
    "alias_config_files": ConfigKey(
        list,
        ["tsconfig.json", "jsconfig.json"],
        "Config files searched (in order) for compilerOptions.paths",
    ),
    "sort_keep_prologue": ConfigKey(
        bool,
        False,
        "Keep comments/directives above the first import when sorting",
    ),
}


def config_path(project_root: Path) -> Path:
    return Path(project_root) / CONFIG_DIR / CONFIG_NAME


def default_config() -> dict[str, Any]:
    """Return a config dict with all keys set to their defaults."""
    return {k: copy.deepcopy(v.default) for k, v in CONFIG_SCHEMA.items()}


def load_config(path: Path) -> dict[str, Any]:
    """Load config from disk, filling missing or mistyped keys with defaults."""
    config = default_config()
    if not path.exists():
        return config
    try:
        loaded = json.loads(path.read_text())
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
        log_best_effort_failure(logger, f"read config {path}", exc)
        return config
    if not isinstance(loaded, dict):
        return config

    for key, value in loaded.items():
        schema = CONFIG_SCHEMA.get(key)
        if schema is None or isinstance(value, schema.type):
            config[key] = value
    return config


def save_config(config: dict, path: Path) -> None:
    """Save config to disk atomically."""
    safe_write_text(path, json.dumps(config, indent=2) + "\n")


def set_config_value(config: dict, key: str, raw: str) -> None:
    """Parse and set a config value from a raw string.

    Bools accept true/false/1/0/yes/no; list keys append (deduplicated).
    """
    if key not in CONFIG_SCHEMA:
        raise KeyError(f"Unknown config key: {key}")

    schema = CONFIG_SCHEMA[key]
    if schema.type is bool:
        if raw.lower() in ("true", "1", "yes"):
            config[key] = True
        elif raw.lower() in ("false", "0", "no"):
            config[key] = False
        else:
            raise ValueError(f"Expected true/false for {key}, got: {raw}")
    elif schema.type is list:
        config.setdefault(key, [])
        if raw not in config[key]:
            config[key].append(raw)
    else:
        config[key] = raw


def unset_config_value(config: dict, key: str) -> None:
    """Reset a config key to its default value."""
    if key not in CONFIG_SCHEMA:
        raise KeyError(f"Unknown config key: {key}")
    config[key] = copy.deepcopy(CONFIG_SCHEMA[key].default)


__all__ = [
    "CONFIG_SCHEMA",
    "ConfigKey",
    "config_path",
    "default_config",
    "load_config",
    "save_config",
    "set_config_value",
    "unset_config_value",
]
