"""config command: show/set/unset .importsweep/config.json."""

from __future__ import annotations

import argparse
from pathlib import Path

from importsweep.cli import resolve_root_arg
from importsweep.core.config import (
    CONFIG_SCHEMA,
    config_path,
    load_config,
    save_config,
    set_config_value,
    unset_config_value,
)
from importsweep.core.fallbacks import print_error
from importsweep.driver import find_project_root
from importsweep.utils import colorize


def _config_file(args: argparse.Namespace) -> Path:
    root_arg = resolve_root_arg(args)
    if root_arg:
        return config_path(Path(root_arg).resolve())
    cwd = Path.cwd()
    return config_path(find_project_root(cwd) or cwd)


def cmd_config(args: argparse.Namespace) -> int:
    """Handle config subcommands: show, set, unset."""
    action = getattr(args, "config_action", None)
    if action == "set":
        return _config_set(args)
    if action == "unset":
        return _config_unset(args)
    return _config_show(args)


def _config_show(args) -> int:
    """Print all config keys with current values and descriptions."""
    path = _config_file(args)
    config = load_config(path)

    print(colorize(f"\n  importsweep configuration ({path})\n", "bold"))
    for key, schema in CONFIG_SCHEMA.items():
        value = config.get(key, schema.default)
        if isinstance(value, list):
            display = ", ".join(value) if value else "(empty)"
        else:
            display = str(value)
        default_tag = colorize(" (default)", "dim") if value == schema.default else ""
        print(f"  {key:<22} {display}{default_tag}")
        print(colorize(f"  {'':22} {schema.description}", "dim"))
    print()
    return 0


def _config_set(args) -> int:
    path = _config_file(args)
    config = load_config(path)
    key = args.config_key

    try:
        set_config_value(config, key, args.config_value)
    except (KeyError, ValueError) as e:
        print_error(str(e).strip("'\""))
        return 1

    try:
        save_config(config, path)
    except OSError as e:
        print_error(f"could not save config: {e}")
        return 1
    print(colorize(f"  Set {key} = {config[key]}", "green"))
    return 0


def _config_unset(args) -> int:
    path = _config_file(args)
    config = load_config(path)
    key = args.config_key

    try:
        unset_config_value(config, key)
    except KeyError as e:
        print_error(str(e).strip("'\""))
        return 1

    try:
        save_config(config, path)
    except OSError as e:
        print_error(f"could not save config: {e}")
        return 1
    print(colorize(f"  Reset {key} to default ({CONFIG_SCHEMA[key].default})", "green"))
    return 0


__all__ = ["cmd_config"]
