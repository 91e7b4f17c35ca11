"""Shared test fixtures for readme-sync."""

from pathlib import Path

import pytest

from readme_sync.execute import ExecutionResult

HELLO_PHP = (
    "\n"
    "<?php\n"
    "\n"
    "require '../vendor/autoload.php';\n"
    "\n"
    'echo "Hello\\n";\n'
)


class FakeExecutor:
    """Records each script it is asked to run and returns canned output."""

    def __init__(self, output: str | None = ""):
        self.output = output
        self.paths: list[Path] = []
        self.scripts: list[str] = []

    def run(self, path: Path) -> ExecutionResult:
        self.paths.append(path)
        self.scripts.append(path.read_text())
        return ExecutionResult(output=self.output, ok=self.output is not None)


@pytest.fixture
def fake_executor():
    return FakeExecutor


@pytest.fixture
def repo(tmp_path):
    """A project root with one example one directory below the README."""
    examples = tmp_path / "examples"
    examples.mkdir()
    (examples / "hello.php").write_text(HELLO_PHP)
    return tmp_path
