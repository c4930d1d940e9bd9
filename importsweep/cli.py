"""CLI entry point: argparse, subcommand routing."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from importsweep.passes import PASSES

USAGE_EXAMPLES = """
commands:
  alias-imports <target>           Rewrite relative imports to tsconfig path aliases
  sort-imports <target>            Move imports to the top, ordered by module specifier
  remove-unused-imports <target>   Drop import bindings the file never uses
  config show|set|unset            Inspect or change .importsweep/config.json

examples:
  importsweep alias-imports src
  importsweep sort-imports src/components/Button.tsx
  importsweep remove-unused-imports src --dry-run --exclude generated
  importsweep config set exclude __generated__
  importsweep config set sort_keep_prologue true
"""

_PASS_HELP = {
    "alias-imports": "Rewrite relative imports to tsconfig path aliases",
    "sort-imports": "Sort import statements by module specifier",
    "remove-unused-imports": "Remove unused import bindings",
}


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="importsweep",
        description="importsweep: alias, sort and prune JS/TS imports",
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument("--root", type=str, default=None,
                        help="Project root (default: $IMPORTSWEEP_ROOT or nearest "
                             "directory with tsconfig.json/jsconfig.json/package.json/.git)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    for name in PASSES:
        p_pass = sub.add_parser(name, help=_PASS_HELP[name])
        p_pass.add_argument("target", type=str, help="File or directory to transform")
        p_pass.add_argument("--dry-run", action="store_true",
                            help="Report files that would change without writing them")
        p_pass.add_argument("--exclude", nargs="+", metavar="DIR", default=None,
                            help="Extra directories to skip (added to config 'exclude')")

    p_config = sub.add_parser("config", help="Show or change tool configuration")
    config_sub = p_config.add_subparsers(dest="config_action")
    config_sub.add_parser("show", help="Show all config keys")
    p_set = config_sub.add_parser("set", help="Set a config key")
    p_set.add_argument("config_key", type=str)
    p_set.add_argument("config_value", type=str)
    p_unset = config_sub.add_parser("unset", help="Reset a config key to its default")
    p_unset.add_argument("config_key", type=str)

    return parser


def resolve_root_arg(args: argparse.Namespace) -> str | None:
    """Explicit --root, then $IMPORTSWEEP_ROOT, else None (auto-detect)."""
    return getattr(args, "root", None) or os.environ.get("IMPORTSWEEP_ROOT") or None


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # Lazy-load command handlers
    from importsweep.commands.config_cmd import cmd_config
    from importsweep.commands.transform_cmd import cmd_transform

    try:
        if args.command == "config":
            return cmd_config(args)
        return cmd_transform(args)
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
