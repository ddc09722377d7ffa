"""
Runtime Configuration

Configuration shared by the CLI and the HTTP API: which strategy to
build trees with, logging and output preferences.

Precedence (lowest to highest):
1. Dataclass defaults
2. JSON config file (explicit path, or ./mrkl.json, ./.mrkl.json,
   ~/.config/mrkl/config.json)
3. MRKL_* environment variables (a .env file is loaded first)
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from mrkl.crypto.hashing import DIGESTS
from mrkl.crypto.strategies import DEFAULT_ALGORITHM, DEFAULT_LEAF_MODE, LEAF_MODES
from mrkl.schemas.errors import UnsupportedAlgorithmException

load_dotenv()


# Environment variable prefix
ENV_PREFIX = "MRKL_"

OUTPUT_FORMATS = ("human", "json")


@dataclass
class RuntimeConfig:
    """Main runtime configuration."""

    # Strategy
    algorithm: str = DEFAULT_ALGORITHM
    leaf_mode: str = DEFAULT_LEAF_MODE

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    # Output
    output_format: str = "human"  # "human" or "json"

    def validate(self) -> None:
        """
        Check names against the supported algorithms and leaf modes.

        Raises:
            UnsupportedAlgorithmException: On an unknown algorithm or leaf mode
            ValueError: On an unknown output format
        """
        if self.algorithm not in DIGESTS:
            raise UnsupportedAlgorithmException(self.algorithm, sorted(DIGESTS))
        if self.leaf_mode not in LEAF_MODES:
            raise UnsupportedAlgorithmException(
                self.leaf_mode, list(LEAF_MODES), kind="leaf mode"
            )
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of: {', '.join(OUTPUT_FORMATS)}"
            )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def load_config_from_env(config: RuntimeConfig | None = None) -> RuntimeConfig:
    """Apply MRKL_* environment variables on top of config (or defaults)."""
    config = config or RuntimeConfig()

    if os.getenv(f"{ENV_PREFIX}ALGORITHM"):
        config.algorithm = os.getenv(f"{ENV_PREFIX}ALGORITHM", DEFAULT_ALGORITHM)
    if os.getenv(f"{ENV_PREFIX}LEAF_MODE"):
        config.leaf_mode = os.getenv(f"{ENV_PREFIX}LEAF_MODE", DEFAULT_LEAF_MODE)

    # Logging
    if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
        config.log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "INFO")
    if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
        config.log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")

    if os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT"):
        config.output_format = os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT", "human")

    return config


def load_config_from_file(path: Path) -> RuntimeConfig:
    """Load configuration from a JSON file."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r") as f:
        data = json.load(f)

    config = RuntimeConfig()

    config.algorithm = data.get("algorithm", config.algorithm)
    config.leaf_mode = data.get("leaf_mode", config.leaf_mode)

    # Logging
    config.log_level = data.get("log_level", config.log_level)
    config.log_file = data.get("log_file", config.log_file)

    config.output_format = data.get("output_format", config.output_format)

    return config


def default_config_paths() -> list[Path]:
    return [
        Path.cwd() / "mrkl.json",
        Path.cwd() / ".mrkl.json",
        Path.home() / ".config" / "mrkl" / "config.json",
    ]


def load_config(config_path: Path | None = None) -> RuntimeConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to config file

    Returns:
        Merged, validated configuration

    Raises:
        FileNotFoundError: If config_path is given but missing
        UnsupportedAlgorithmException: If the merged config names an
            unknown algorithm or leaf mode
    """
    config = RuntimeConfig()

    if config_path is not None:
        config = load_config_from_file(config_path)
    else:
        for default_path in default_config_paths():
            if default_path.exists():
                config = load_config_from_file(default_path)
                break

    config = load_config_from_env(config)
    config.validate()
    return config


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return json.dumps(RuntimeConfig().to_dict(), indent=2) + "\n"


__all__ = [
    "ENV_PREFIX",
    "OUTPUT_FORMATS",
    "RuntimeConfig",
    "load_config_from_env",
    "load_config_from_file",
    "default_config_paths",
    "load_config",
    "get_default_config_template",
]
