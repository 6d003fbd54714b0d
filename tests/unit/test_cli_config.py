"""
CLI Configuration Unit Tests
Tests for merkletree_cli/config.py
"""
import json

import pytest

from merkletree_cli.config import (
    CLIConfig,
    get_default_config_template,
    load_config,
    load_config_from_env,
    load_config_from_file,
)


class TestCLIConfig:
    """Tests for the CLIConfig dataclass."""

    def test_defaults(self):
        """Defaults: INFO logging, human output, one block per file."""
        config = CLIConfig()

        assert config.log_level == "INFO"
        assert config.log_file is None
        assert config.default_output_format == "human"
        assert config.chunk_size == 0

    def test_invalid_output_format(self):
        """Unknown output formats are rejected."""
        with pytest.raises(ValueError, match="default_output_format"):
            CLIConfig(default_output_format="xml")

    def test_negative_chunk_size(self):
        """Negative chunk sizes are rejected."""
        with pytest.raises(ValueError, match="chunk_size"):
            CLIConfig(chunk_size=-1)

    def test_template_round_trips(self, tmp_path):
        """The template file loads back to the defaults."""
        path = tmp_path / "merkletree.json"
        path.write_text(get_default_config_template())

        assert load_config_from_file(path) == CLIConfig()


class TestLoadConfig:
    """Tests for file and environment loading."""

    def test_env_only(self, monkeypatch):
        """MERKLETREE_* variables are read."""
        monkeypatch.setenv("MERKLETREE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("MERKLETREE_OUTPUT_FORMAT", "JSON")
        monkeypatch.setenv("MERKLETREE_CHUNK_SIZE", "1024")

        config = load_config_from_env()

        assert config.log_level == "DEBUG"
        assert config.default_output_format == "json"
        assert config.chunk_size == 1024

    def test_file(self, tmp_path):
        """Values from a JSON file are applied."""
        path = tmp_path / "cfg.json"
        path.write_text(json.dumps({"log_level": "WARNING", "chunk_size": 64}))

        config = load_config(path)

        assert config.log_level == "WARNING"
        assert config.chunk_size == 64

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        """Environment variables take precedence over the file."""
        path = tmp_path / "cfg.json"
        path.write_text(json.dumps({"log_level": "WARNING", "chunk_size": 64}))
        monkeypatch.setenv("MERKLETREE_CHUNK_SIZE", "8")

        config = load_config(path)

        assert config.log_level == "WARNING"
        assert config.chunk_size == 8

    def test_default_location_in_cwd(self, tmp_path):
        """./merkletree.json is picked up when no path is given."""
        (tmp_path / "merkletree.json").write_text(json.dumps({"log_level": "ERROR"}))

        assert load_config().log_level == "ERROR"

    def test_missing_explicit_file_raises(self, tmp_path):
        """An explicit config path must exist."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "absent.json")

    def test_dotenv_file(self, tmp_path, monkeypatch):
        """A .env file in the working directory is loaded."""
        (tmp_path / ".env").write_text("MERKLETREE_LOG_FILE=merkle.log\n")
        # load_dotenv writes to os.environ; have monkeypatch remove it afterwards
        monkeypatch.setenv("MERKLETREE_LOG_FILE", "")
        monkeypatch.delenv("MERKLETREE_LOG_FILE")

        config = load_config()

        assert config.log_file == "merkle.log"
