"""Command-line entry point for creating packages."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from noname.scaffold import ScaffoldError, cmd_init, cmd_new


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="noname")
    commands = parser.add_subparsers(dest="command", required=True)

    new = commands.add_parser("new", help="create a new package in a new directory")
    new.add_argument("-p", "--path", required=True, help="path to the directory to create")
    new.add_argument("--lib", action="store_true", help="create a library instead of a binary")

    init = commands.add_parser("init", help="create a new package in an existing directory")
    init.add_argument("-p", "--path", default=None, help="path to the existing directory")
    init.add_argument("--lib", action="store_true", help="create a library instead of a binary")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = _parser().parse_args(argv)

    try:
        if args.command == "new":
            path = cmd_new(args.path, args.lib)
        else:
            path = cmd_init(args.path, args.lib)
    except ScaffoldError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"created new package at `{path}`")
    return 0


if __name__ == "__main__":
    sys.exit(main())