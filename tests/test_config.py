"""Tests for configuration loading."""

from pathlib import Path

import pytest
import yaml

from readme_sync.config import CONFIG_FILENAME, SyncConfig, load_config, resolve_root


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("README_SYNC_ROOT", raising=False)
    monkeypatch.delenv("README_SYNC_RUNTIME", raising=False)


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path):
        config = load_config(tmp_path)
        assert config == SyncConfig(documents=["README.md"], runtime="php", stage=True)

    def test_reads_root_file(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text(
            "documents:\n  - README.md\n  - docs/usage.md\nruntime: php8.3\nstage: false\n"
        )
        config = load_config(tmp_path)
        assert config.documents == ["README.md", "docs/usage.md"]
        assert config.runtime == "php8.3"
        assert config.stage is False

    def test_single_document_string(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text("documents: docs/index.md\n")
        assert load_config(tmp_path).documents == ["docs/index.md"]

    def test_empty_file_uses_defaults(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert load_config(tmp_path) == SyncConfig()

    def test_explicit_path(self, tmp_path):
        other = tmp_path / "sync.yaml"
        other.write_text("runtime: /opt/php/bin/php\n")
        assert load_config(tmp_path, other).runtime == "/opt/php/bin/php"

    def test_explicit_missing_path_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path, tmp_path / "nope.yaml")

    def test_env_runtime_overrides_file(self, tmp_path, monkeypatch):
        (tmp_path / CONFIG_FILENAME).write_text("runtime: php8.1\n")
        monkeypatch.setenv("README_SYNC_RUNTIME", "php8.4")
        assert load_config(tmp_path).runtime == "php8.4"

    @pytest.mark.parametrize("content,message", [
        ("- README.md\n", "not a YAML mapping"),
        ("readme: README.md\n", "unknown keys: readme"),
        ("documents: [1, 2]\n", "'documents' must be a list"),
        ("runtime: ''\n", "'runtime' must be a non-empty string"),
        ("stage: yes please\n", "'stage' must be true or false"),
    ])
    def test_invalid(self, tmp_path, content, message):
        (tmp_path / CONFIG_FILENAME).write_text(content)
        with pytest.raises(ValueError, match=message):
            load_config(tmp_path)

    def test_malformed_yaml(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text("documents: [README.md\n")
        with pytest.raises(yaml.YAMLError):
            load_config(tmp_path)


class TestResolveRoot:
    def test_explicit(self, tmp_path):
        assert resolve_root(str(tmp_path)) == tmp_path.resolve()

    def test_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("README_SYNC_ROOT", str(tmp_path))
        assert resolve_root() == tmp_path.resolve()

    def test_falls_back_to_git(self, tmp_path, monkeypatch):
        monkeypatch.setattr(
            "readme_sync.git.repository_root", lambda start=None: Path("/repo"),
        )
        assert resolve_root() == Path("/repo")
