"""Canonical form for captured example output."""

from __future__ import annotations


def normalize_output(output: str) -> str:
    """Right-trim every line and drop leading/trailing blank lines."""
    lines = [line.rstrip() for line in output.split("\n")]

    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()

    return "\n".join(lines)
