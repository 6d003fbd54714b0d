"""
CLI Configuration

Configuration management for the merkletree CLI.
Supports a JSON configuration file, environment variables and a .env file.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from dotenv import find_dotenv, load_dotenv


# Environment variable prefix
ENV_PREFIX = "MERKLETREE_"

OUTPUT_FORMATS = ("human", "json")


@dataclass
class CLIConfig:
    """Main CLI configuration."""

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    # Output
    default_output_format: str = "human"  # "human" or "json"

    # Input: 0 means one block per file
    chunk_size: int = 0

    def __post_init__(self) -> None:
        if self.default_output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"default_output_format must be one of {OUTPUT_FORMATS}, "
                f"got {self.default_output_format!r}"
            )
        if self.chunk_size < 0:
            raise ValueError(f"chunk_size must be non-negative, got {self.chunk_size}")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _env_overrides() -> dict[str, Any]:
    """
    Read configuration overrides from environment variables.

    Supported variables:
    - MERKLETREE_LOG_LEVEL: Log level name
    - MERKLETREE_LOG_FILE: Path of an additional log file
    - MERKLETREE_OUTPUT_FORMAT: "human" or "json"
    - MERKLETREE_CHUNK_SIZE: Block size in bytes (0 = one block per file)
    """
    load_dotenv(find_dotenv(usecwd=True))

    overrides: dict[str, Any] = {}
    if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
        overrides["log_level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
    if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
        overrides["log_file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")
    if os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT"):
        overrides["default_output_format"] = os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT", "human").lower()
    if os.getenv(f"{ENV_PREFIX}CHUNK_SIZE"):
        overrides["chunk_size"] = int(os.getenv(f"{ENV_PREFIX}CHUNK_SIZE", "0"))
    return overrides


def load_config_from_env() -> CLIConfig:
    """Load configuration from environment variables only."""
    return CLIConfig(**_env_overrides())


def load_config_from_file(path: Path) -> CLIConfig:
    """Load configuration from a JSON file."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r") as f:
        data = json.load(f)

    config = CLIConfig()
    return CLIConfig(
        log_level=data.get("log_level", config.log_level),
        log_file=data.get("log_file", config.log_file),
        default_output_format=data.get("default_output_format", config.default_output_format),
        chunk_size=data.get("chunk_size", config.chunk_size),
    )


def default_config_paths() -> list[Path]:
    return [
        Path.cwd() / "merkletree.json",
        Path.cwd() / ".merkletree.json",
        Path.home() / ".config" / "merkletree" / "config.json",
    ]


def load_config(config_path: Path | None = None) -> CLIConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to config file

    Returns:
        Merged configuration
    """
    config = CLIConfig()

    if config_path is not None:
        config = load_config_from_file(config_path)
    else:
        for default_path in default_config_paths():
            if default_path.exists():
                config = load_config_from_file(default_path)
                break

    overrides = _env_overrides()
    if not overrides:
        return config

    merged = config.to_dict()
    merged.update(overrides)
    return CLIConfig(**merged)


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return json.dumps(CLIConfig().to_dict(), indent=2) + "\n"
