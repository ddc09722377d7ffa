"""
CLI Proof Command

Create the inclusion proof for one leaf.

Usage:
    mrkl proof <index> <leaf>... [--json] [--out PATH]

Human output prints one element per line ('l<hex>' / 'r<hex>'), ready to
be passed back to `mrkl verify`. JSON output is a ProofDocument.
"""

from __future__ import annotations

import logging
from argparse import Namespace
from pathlib import Path

from mrkl.merkle.merkle_proofs import MerkleProver
from mrkl.schemas.proof import ProofDocument, format_proof
from mrkl_cli.common import (
    EXIT_SUCCESS,
    parse_leaves,
    resolve_strategy,
    wants_json,
)


logger = logging.getLogger(__name__)


def proof_cmd(args: Namespace) -> int:
    """Execute the proof command."""
    strategy = resolve_strategy(args)
    leaves = parse_leaves(args.leaves)

    logger.info(f"Creating proof for leaf {args.index} of {len(leaves)}")
    proof = MerkleProver.prove(leaves, args.index, strategy)
    document = ProofDocument.from_proof(proof, strategy.algorithm, strategy.leaf_mode)

    if args.out:
        out_path = Path(args.out)
        out_path.write_text(document.model_dump_json(indent=2) + "\n")
        logger.info(f"Wrote proof document to {out_path}")

    if wants_json(args):
        print(document.model_dump_json(indent=2))
    else:
        for line in format_proof(proof.elements):
            print(line)
    return EXIT_SUCCESS
