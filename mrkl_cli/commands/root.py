"""
CLI Root Command

Compute a Merkle root over an ordered list of hex leaf digests.

Usage:
    mrkl root <leaf>... [--json]
"""

from __future__ import annotations

import logging
from argparse import Namespace

from mrkl.crypto.hashing import to_hex
from mrkl.merkle.merkle_tree import compute_root
from mrkl_cli.common import (
    EXIT_SUCCESS,
    parse_leaves,
    print_json,
    resolve_strategy,
    wants_json,
)


logger = logging.getLogger(__name__)


def root_cmd(args: Namespace) -> int:
    """
    Execute the root command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    strategy = resolve_strategy(args)
    leaves = parse_leaves(args.leaves)

    logger.info(f"Computing root over {len(leaves)} leaves with {strategy.name}")
    root = to_hex(compute_root(leaves, strategy))

    if wants_json(args):
        print_json({
            "algorithm": strategy.algorithm,
            "leaf_mode": strategy.leaf_mode,
            "leaves": len(leaves),
            "root": root,
        })
    else:
        print(root)
    return EXIT_SUCCESS
