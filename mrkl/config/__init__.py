"""
Runtime Configuration Module

Provides configuration loading and management for the CLI and API.
"""

from .runtime import (
    ENV_PREFIX,
    RuntimeConfig,
    load_config,
    get_default_config_template,
)

__all__ = [
    "ENV_PREFIX",
    "RuntimeConfig",
    "load_config",
    "get_default_config_template",
]
