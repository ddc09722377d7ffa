"""
API Dependencies

Runtime configuration and strategy resolution for request handlers.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from mrkl.config.runtime import RuntimeConfig, load_config
from mrkl.crypto.strategies import DigestMerge, get_strategy
from mrkl_api.models.requests import StrategyFields

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_runtime_config() -> RuntimeConfig:
    """
    Load RuntimeConfig once per process.

    Search order for config file: ./mrkl.json, ./.mrkl.json,
    ~/.config/mrkl/config.json. MRKL_* environment variables always win.
    """
    config = load_config()
    logger.info(f"API strategy defaults: {config.algorithm}/{config.leaf_mode}")
    return config


def resolve_strategy(request: StrategyFields) -> DigestMerge:
    """Request fields win over the runtime config defaults."""
    config = get_runtime_config()
    return get_strategy(
        request.algorithm or config.algorithm,
        request.leaf_mode or config.leaf_mode,
    )
