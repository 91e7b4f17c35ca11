"""Command-line interface for readme-sync.

Usage:
    readme-sync sync [DOCUMENT ...] [--dry-run] [--no-stage] [--runtime BIN]
    readme-sync check [DOCUMENT ...] [--runtime BIN]
    readme-sync install-hook [--force]

Global options (before the command):
    --root DIR       Repository root (default: $README_SYNC_ROOT or git toplevel)
    --config FILE    Config file (default: <root>/.readme-sync.yaml)
    -v, --verbose    Log progress and skipped documents
"""

import argparse
import logging
import sys

from readme_sync import __version__
from readme_sync.cli.hooks import cmd_install_hook
from readme_sync.cli.sync import cmd_check, cmd_sync


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readme-sync",
        description="Sync README code examples and their output with example files",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--root", default=None,
        help="Repository root directory",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to config file (default: <root>/.readme-sync.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Show progress and skipped documents",
    )
    sub = parser.add_subparsers(dest="command")

    # sync
    sync = sub.add_parser("sync", help="Rewrite documents in place")
    sync.add_argument(
        "documents", nargs="*",
        help="Documents relative to the root (default: from config)",
    )
    sync.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )
    sync.add_argument(
        "--no-stage", action="store_true",
        help="Don't git add rewritten documents",
    )
    sync.add_argument(
        "--runtime", default=None,
        help="Executable used to run examples (default: php)",
    )

    # check
    check = sub.add_parser(
        "check", help="Exit 1 if any document is out of sync",
    )
    check.add_argument(
        "documents", nargs="*",
        help="Documents relative to the root (default: from config)",
    )
    check.add_argument(
        "--runtime", default=None,
        help="Executable used to run examples (default: php)",
    )

    # install-hook
    hook = sub.add_parser(
        "install-hook", help="Install the git pre-commit hook",
    )
    hook.add_argument(
        "--force", action="store_true",
        help="Overwrite an existing pre-commit hook",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    dispatch = {
        "sync": cmd_sync,
        "check": cmd_check,
        "install-hook": cmd_install_hook,
    }
    return dispatch[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
