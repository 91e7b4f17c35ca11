"""Git side of the pre-commit hook: root discovery, staging, hook install."""

from __future__ import annotations

import logging
import stat
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

HOOK_SCRIPT = """#!/bin/sh
# Installed by readme-sync: keep README examples in sync before each commit.
exec readme-sync sync
"""


def _run_git(args: list[str], cwd: Path | str) -> subprocess.CompletedProcess:
    """Run a git command and return the result."""
    return subprocess.run(
        ["git"] + args,
        cwd=cwd,
        capture_output=True,
        text=True,
    )


def repository_root(start: Path | str | None = None) -> Path:
    """Return the top of the git work tree containing ``start``.

    Falls back to ``start`` (or the current directory) outside a repository
    or when git isn't installed.
    """
    base = Path(start) if start else Path.cwd()
    try:
        result = _run_git(["rev-parse", "--show-toplevel"], base)
    except OSError:
        return base.resolve()
    if result.returncode != 0 or not result.stdout.strip():
        return base.resolve()
    return Path(result.stdout.strip())


def stage_file(root: Path | str, path: Path | str) -> bool:
    """``git add`` a file. Returns False (and logs) if staging failed."""
    try:
        result = _run_git(["add", str(path)], root)
    except OSError as e:
        logger.warning("Could not stage %s: %s", path, e)
        return False
    if result.returncode != 0:
        logger.warning("Could not stage %s: %s", path, result.stderr.strip())
        return False
    return True


def install_hook(root: Path | str, force: bool = False) -> dict:
    """Install a pre-commit hook that runs ``readme-sync sync``.

    Args:
        root: Repository root.
        force: Overwrite an existing pre-commit hook.

    Returns:
        Dict with: installed (bool), path, and error when not installed.
    """
    try:
        result = _run_git(["rev-parse", "--git-path", "hooks"], root)
    except OSError as e:
        return {"installed": False, "path": None, "error": str(e)}
    if result.returncode != 0:
        return {"installed": False, "path": None, "error": f"Not a git repository: {root}"}

    hooks_dir = Path(result.stdout.strip())
    if not hooks_dir.is_absolute():
        hooks_dir = Path(root) / hooks_dir
    hook_path = hooks_dir / "pre-commit"

    if hook_path.exists() and not force:
        return {
            "installed": False,
            "path": str(hook_path),
            "error": "pre-commit hook already exists (use --force to overwrite)",
        }

    hooks_dir.mkdir(parents=True, exist_ok=True)
    hook_path.write_text(HOOK_SCRIPT)
    mode = hook_path.stat().st_mode
    hook_path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return {"installed": True, "path": str(hook_path)}
