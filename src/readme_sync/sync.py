"""README sync — walks the document, regenerates marked blocks.

The scan is a single forward pass over the lines:
1. A ``<!-- source: path -->`` line followed by a ```` ```php ```` fence has
   its block replaced with the current contents of ``path``.
2. A ``<!-- output: path -->`` line followed by a fence has its block
   replaced with the output of running ``path``.
3. Any other line, including a marker with no fence after it, is copied.

Re-running the sync on an already synced document reproduces it exactly.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from readme_sync import CLOSE_FENCE, OPEN_FENCE, OUTPUT_MARKER, SOURCE_MARKER
from readme_sync.execute import Executor, execute_example
from readme_sync.extract import extract_source

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENT = "README.md"

_SOURCE_RE = re.compile(SOURCE_MARKER)
_OUTPUT_RE = re.compile(OUTPUT_MARKER)
_OPEN_FENCE_RE = re.compile(OPEN_FENCE)


@dataclass(frozen=True)
class Marker:
    """Classification of one document line."""

    kind: str  # "source", "output" or "plain"
    path: str | None = None


PLAIN = Marker("plain")


def classify_line(line: str) -> Marker:
    """Match a line against the marker patterns, source first."""
    stripped = line.strip()
    match = _SOURCE_RE.match(stripped)
    if match:
        return Marker("source", match.group(1))
    match = _OUTPUT_RE.match(stripped)
    if match:
        return Marker("output", match.group(1))
    return PLAIN


def is_open_fence(line: str) -> bool:
    return _OPEN_FENCE_RE.match(line) is not None


def _replace_block(
    lines: list[str],
    i: int,
    result: list[str],
    produce: Callable[[], str | None],
) -> int:
    """Rewrite the fenced block starting at ``lines[i]``; return the next index.

    Does nothing when ``lines[i]`` is not an opening fence. A block with no
    closing fence runs to the end of the document and stays unclosed.
    """
    if i >= len(lines) or not is_open_fence(lines[i]):
        return i

    result.append(lines[i])
    i += 1

    while i < len(lines) and lines[i] != CLOSE_FENCE:
        i += 1

    content = produce()
    if content is not None:
        result.extend(content.rstrip().split("\n"))

    if i < len(lines) and lines[i] == CLOSE_FENCE:
        result.append(lines[i])
        i += 1

    return i


def sync_document(
    text: str,
    root: Path | str,
    executor: Executor | None = None,
    log: logging.Logger | None = None,
) -> str:
    """Return ``text`` with every marked block regenerated.

    Args:
        text: Full document contents.
        root: Repository root that marker paths are relative to.
        executor: Runs examples for output blocks. Defaults to ``PhpExecutor``.
        log: Logger receiving per-block warnings.

    Returns:
        The rewritten document. Blocks whose reference could not be read or
        run are emptied; nothing is raised for them.
    """
    log = log or logger
    lines = text.split("\n")
    result: list[str] = []
    i = 0

    while i < len(lines):
        line = lines[i]
        marker = classify_line(line)

        if marker.kind == "source":
            result.append(line)
            i = _replace_block(
                lines, i + 1, result,
                lambda: extract_source(marker.path, root, log),
            )
        elif marker.kind == "output":
            result.append(line)
            i = _replace_block(
                lines, i + 1, result,
                lambda: execute_example(marker.path, root, executor, log),
            )
        else:
            result.append(line)
            i += 1

    return "\n".join(result)


@dataclass
class SyncResult:
    """Outcome of syncing one document file.

    ``action`` is one of "missing", "unreadable", "unwritable", "unchanged"
    or "updated".
    """

    path: Path
    action: str
    content: str | None = None
    dry_run: bool = False

    @property
    def changed(self) -> bool:
        return self.action == "updated"


def sync_file(
    root: Path | str,
    document: str = DEFAULT_DOCUMENT,
    executor: Executor | None = None,
    log: logging.Logger | None = None,
    dry_run: bool = False,
) -> SyncResult:
    """Sync one document on disk, writing it back only if it changed."""
    log = log or logger
    doc_path = Path(root) / document

    if not doc_path.exists():
        log.info("%s not found, skipping sync", document)
        return SyncResult(path=doc_path, action="missing", dry_run=dry_run)

    log.debug("Syncing %s with example files...", document)

    try:
        with open(doc_path, encoding="utf-8", newline="") as f:
            original = f.read()
    except (OSError, UnicodeDecodeError) as e:
        log.error("Failed to read %s: %s", document, e)
        return SyncResult(path=doc_path, action="unreadable", dry_run=dry_run)

    updated = sync_document(original, root, executor, log)

    if updated == original:
        return SyncResult(path=doc_path, action="unchanged", content=updated, dry_run=dry_run)

    if not dry_run:
        try:
            with open(doc_path, "w", encoding="utf-8", newline="") as f:
                f.write(updated)
        except OSError as e:
            log.error("Failed to write %s: %s", document, e)
            return SyncResult(path=doc_path, action="unwritable", content=updated, dry_run=dry_run)
    return SyncResult(path=doc_path, action="updated", content=updated, dry_run=dry_run)
