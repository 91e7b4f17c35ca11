"""Sync and check CLI commands."""

import argparse

import yaml

from readme_sync.config import load_config, resolve_root
from readme_sync.execute import PhpExecutor
from readme_sync.git import stage_file
from readme_sync.sync import sync_file


def _load(args: argparse.Namespace):
    root = resolve_root(args.root)
    try:
        config = load_config(root, args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"ERROR: {e}")
        return root, None
    if args.documents:
        config.documents = list(args.documents)
    if args.runtime:
        config.runtime = args.runtime
    return root, config


def cmd_sync(args: argparse.Namespace) -> int:
    root, config = _load(args)
    if config is None:
        return 1

    executor = PhpExecutor(config.runtime, cwd=root)
    stage = config.stage and not args.no_stage and not args.dry_run
    prefix = "[DRY RUN] " if args.dry_run else ""
    failed = 0

    for document in config.documents:
        result = sync_file(root, document, executor, dry_run=args.dry_run)

        if result.action == "updated":
            print(f"  {prefix}✓ {document} has been synced with example files")
            if stage and not stage_file(root, result.path):
                print(f"    (could not stage {document})")
        elif result.action == "unchanged":
            print(f"  ✓ {document} is already in sync")
        elif result.action == "unreadable":
            print(f"  ERROR: failed to read {document}")
            failed += 1
        elif result.action == "unwritable":
            print(f"  ERROR: failed to write {document}")
            failed += 1

    return 1 if failed else 0


def cmd_check(args: argparse.Namespace) -> int:
    root, config = _load(args)
    if config is None:
        return 1

    executor = PhpExecutor(config.runtime, cwd=root)
    stale = []
    for document in config.documents:
        result = sync_file(root, document, executor, dry_run=True)
        if result.action in ("updated", "unreadable"):
            stale.append((document, result.action))

    if not stale:
        print(f"  ✓ {len(config.documents)} document(s) in sync")
        return 0

    for document, action in stale:
        reason = "out of sync" if action == "updated" else "unreadable"
        print(f"  ✗ {document}: {reason}")
    return 1
