"""alias-imports / sort-imports / remove-unused-imports commands."""

from __future__ import annotations

import argparse
from pathlib import Path

from importsweep.cli import resolve_root_arg
from importsweep.core.config import config_path, load_config
from importsweep.core.errors import ImportSweepError
from importsweep.core.fallbacks import print_error
from importsweep.driver import find_project_root, run_pass
from importsweep.utils import colorize


def _effective_config(args: argparse.Namespace, root: Path | None) -> dict | None:
    """Tool config for *root* with --exclude merged in; None lets the driver load it."""
    extra = getattr(args, "exclude", None)
    if root is None or not extra:
        return None
    config = load_config(config_path(root))
    config["exclude"] = list(dict.fromkeys([*config["exclude"], *extra]))
    return config


def cmd_transform(args: argparse.Namespace) -> int:
    """Run the pass named by ``args.command`` over ``args.target``."""
    root_arg = resolve_root_arg(args)
    target = Path(args.target).resolve()
    root = Path(root_arg).resolve() if root_arg else find_project_root(target)

    try:
        result = run_pass(
            target,
            args.command,
            root=root,
            config=_effective_config(args, root),
            dry_run=args.dry_run,
        )
    except ImportSweepError as e:
        print_error(str(e))
        return 1

    if args.dry_run:
        for shown in result.changed:
            print(colorize(f"  would change {shown}", "cyan"))
    color = "yellow" if result.skipped else "green"
    print(colorize(result.summary(), color))
    return 1 if result.skipped else 0


__all__ = ["cmd_transform"]
