"""Read an example file and prepare it for display in the README."""

from __future__ import annotations

import logging
from pathlib import Path

from readme_sync import AUTOLOAD_DISPLAY, AUTOLOAD_RELATIVE, OPEN_TAG

logger = logging.getLogger(__name__)

# Examples live one directory below the README, so their loader path
# reads "../vendor"; the README shows it relative to the project root.
DISPLAY_REWRITES = [
    (f"include '{AUTOLOAD_RELATIVE}'", f"include '{AUTOLOAD_DISPLAY}'"),
    (f"require '{AUTOLOAD_RELATIVE}'", f"require '{AUTOLOAD_DISPLAY}'"),
]


def resolve_reference(root: Path | str, reference: str) -> Path:
    """Join a marker's reference path onto the repository root.

    References are not checked against the root: both the README and the
    root come from the same repository and are trusted as such.
    """
    return Path(f"{root}/{reference}")


def read_reference(
    root: Path | str,
    reference: str,
    log: logging.Logger | None = None,
) -> str | None:
    """Return the text of a referenced file, or None after logging why not."""
    log = log or logger
    full_path = resolve_reference(root, reference)

    if not full_path.exists():
        log.warning("Source file not found: %s", reference)
        return None

    try:
        with open(full_path, encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError):
        log.warning("Failed to read source file: %s", reference)
        return None


def strip_preamble(code: str) -> str:
    """Drop blank lines ahead of the opening tag or first line of code."""
    lines = code.split("\n")
    for index, line in enumerate(lines):
        stripped = line.strip()
        if stripped == OPEN_TAG:
            return "\n".join([OPEN_TAG] + lines[index + 1:])
        if stripped:
            return "\n".join(lines[index:])
    return ""


def extract_source(
    reference: str,
    root: Path | str,
    log: logging.Logger | None = None,
) -> str | None:
    """Return display-ready source for an example file.

    Args:
        reference: Path from the marker, relative to ``root``.
        root: Repository root.
        log: Logger receiving warnings. Defaults to this module's logger.

    Returns:
        The rewritten source, or None when the file is missing or unreadable.
        Callers must leave the block alone in that case.
    """
    code = read_reference(root, reference, log)
    if code is None:
        return None

    for relative, display in DISPLAY_REWRITES:
        code = code.replace(relative, display)

    return strip_preamble(code)
