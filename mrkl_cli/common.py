"""
CLI - Shared Helpers

Strategy resolution, leaf decoding and output selection used by every
subcommand.
"""

from __future__ import annotations

import json
from argparse import Namespace
from typing import Any, Sequence

from mrkl.config.runtime import RuntimeConfig
from mrkl.crypto.hashing import from_hex
from mrkl.crypto.strategies import DigestMerge, get_strategy


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def get_cli_config(args: Namespace) -> RuntimeConfig:
    """Config attached by main(), or defaults when a command is called directly."""
    return getattr(args, "cli_config", None) or RuntimeConfig()


def resolve_strategy(args: Namespace) -> DigestMerge:
    """Command-line --alg/--leaf-mode win over the loaded configuration."""
    config = get_cli_config(args)
    algorithm = getattr(args, "alg", None) or config.algorithm
    leaf_mode = getattr(args, "leaf_mode", None) or config.leaf_mode
    return get_strategy(algorithm, leaf_mode)


def parse_leaves(values: Sequence[str]) -> list[bytes]:
    """Decode hex leaf arguments. Raises HashFormatException on bad input."""
    return [from_hex(value) for value in values]


def wants_json(args: Namespace) -> bool:
    if getattr(args, "json", False):
        return True
    return get_cli_config(args).output_format == "json"


def print_json(data: Any) -> None:
    print(json.dumps(data, indent=2))
