"""Configuration for readme-sync.

Settings come from, in increasing precedence:
    defaults — README.md, the ``php`` runtime, staging on
    .readme-sync.yaml at the repository root
    environment — README_SYNC_ROOT, README_SYNC_RUNTIME
    command-line flags (applied by the CLI)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from readme_sync.execute import DEFAULT_RUNTIME
from readme_sync.sync import DEFAULT_DOCUMENT

CONFIG_FILENAME = ".readme-sync.yaml"


@dataclass
class SyncConfig:
    documents: list[str] = field(default_factory=lambda: [DEFAULT_DOCUMENT])
    runtime: str = DEFAULT_RUNTIME
    stage: bool = True


def env_root() -> Path | None:
    """Return the root from README_SYNC_ROOT, if set."""
    env = os.environ.get("README_SYNC_ROOT")
    if env:
        return Path(env).expanduser().resolve()
    return None


def load_config(root: Path | str, path: Path | str | None = None) -> SyncConfig:
    """Load settings for a repository.

    Args:
        root: Repository root; ``.readme-sync.yaml`` is looked up here.
        path: Explicit config file. Must exist when given.

    Returns:
        SyncConfig with file and environment settings applied.

    Raises:
        FileNotFoundError: If an explicit ``path`` doesn't exist.
        ValueError: If the file is not a mapping or has bad keys or values.
    """
    config = SyncConfig()
    config_path = Path(path) if path else Path(root) / CONFIG_FILENAME

    if path or config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f)
        _apply(config, data, config_path)

    runtime = os.environ.get("README_SYNC_RUNTIME")
    if runtime:
        config.runtime = runtime

    return config


def _apply(config: SyncConfig, data: object, config_path: Path) -> None:
    if data is None:
        return
    if not isinstance(data, dict):
        raise ValueError(f"{config_path} is not a YAML mapping")

    unknown = sorted(set(data) - {"documents", "runtime", "stage"})
    if unknown:
        raise ValueError(f"{config_path}: unknown keys: {', '.join(unknown)}")

    if "documents" in data:
        documents = data["documents"]
        if isinstance(documents, str):
            documents = [documents]
        if not isinstance(documents, list) or not all(isinstance(d, str) for d in documents):
            raise ValueError(f"{config_path}: 'documents' must be a list of paths")
        config.documents = documents

    if "runtime" in data:
        if not isinstance(data["runtime"], str) or not data["runtime"]:
            raise ValueError(f"{config_path}: 'runtime' must be a non-empty string")
        config.runtime = data["runtime"]

    if "stage" in data:
        if not isinstance(data["stage"], bool):
            raise ValueError(f"{config_path}: 'stage' must be true or false")
        config.stage = data["stage"]


def resolve_root(raw: Path | str | None = None) -> Path:
    """Resolve the repository root from a flag, the environment, or git."""
    from readme_sync.git import repository_root

    if raw:
        return Path(raw).expanduser().resolve()
    return env_root() or repository_root()
