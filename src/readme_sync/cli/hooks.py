"""Hook installation CLI command."""

import argparse

from readme_sync.config import resolve_root
from readme_sync.git import install_hook


def cmd_install_hook(args: argparse.Namespace) -> int:
    root = resolve_root(args.root)
    result = install_hook(root, force=args.force)

    if not result["installed"]:
        print(f"  ERROR: {result['error']}")
        return 1

    print(f"  Installed pre-commit hook: {result['path']}")
    return 0
