"""Run an example file and capture what it prints.

The example is copied to a scratch file with its autoloader path made
absolute, so it runs the same from the temp directory as from its own
directory. stderr is folded into stdout: the README shows whatever the
example really prints, warnings and errors included.
"""

from __future__ import annotations

import logging
import os
import re
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from readme_sync.extract import read_reference
from readme_sync.normalize import normalize_output

logger = logging.getLogger(__name__)

DEFAULT_RUNTIME = "php"

AUTOLOAD_INCLUDE = re.compile(
    r"""(include|require|include_once|require_once)\s+['"]\.\./vendor/autoload\.php['"]"""
)


@dataclass(frozen=True)
class ExecutionResult:
    """Captured output of one run. ``output`` is None when nothing could be captured."""

    output: str | None
    ok: bool


class Executor(Protocol):
    def run(self, path: Path) -> ExecutionResult: ...


class PhpExecutor:
    """Runs a script with the PHP CLI, blocking until it exits."""

    def __init__(self, runtime: str = DEFAULT_RUNTIME, cwd: Path | str | None = None):
        self.runtime = runtime
        self.cwd = cwd

    def run(self, path: Path) -> ExecutionResult:
        try:
            result = subprocess.run(
                [self.runtime, str(path)],
                cwd=self.cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            logger.debug("Could not start %s: %s", self.runtime, e)
            return ExecutionResult(output=None, ok=False)

        if result.returncode != 0:
            logger.debug("%s exited with %d for %s", self.runtime, result.returncode, path)
        return ExecutionResult(output=result.stdout, ok=True)


def absolutize_autoload(code: str, root: Path | str) -> str:
    """Point every ``../vendor/autoload.php`` include at ``<root>/vendor``."""
    target = f"{root}/vendor/autoload.php"
    return AUTOLOAD_INCLUDE.sub(lambda m: f"{m.group(1)} '{target}'", code)


def execute_example(
    reference: str,
    root: Path | str,
    executor: Executor | None = None,
    log: logging.Logger | None = None,
) -> str | None:
    """Execute an example file and return its normalized output.

    Args:
        reference: Path from the marker, relative to ``root``.
        root: Repository root.
        executor: Runs the scratch copy. Defaults to ``PhpExecutor``.
        log: Logger receiving warnings. Defaults to this module's logger.

    Returns:
        Normalized combined output (possibly empty), or None when the file
        is missing, unreadable, could not be staged, or produced no output.
    """
    log = log or logger
    executor = executor or PhpExecutor(cwd=root)

    code = read_reference(root, reference, log)
    if code is None:
        return None

    code = absolutize_autoload(code, root)

    try:
        fd, temp_name = tempfile.mkstemp(prefix="example_", suffix=".php")
    except OSError:
        log.warning("Failed to create temp file for: %s", reference)
        return None

    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(code)

        result = executor.run(temp_path)
        if not result.ok or result.output is None:
            log.warning("Failed to execute: %s", reference)
            return None

        return normalize_output(result.output)
    finally:
        temp_path.unlink(missing_ok=True)
