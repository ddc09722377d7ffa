"""
CLI Batch Command

Compute the root and the proof of every leaf from a single tree build.

Usage:
    mrkl batch <leaf>... [--json] [--out-dir DIR]
"""

from __future__ import annotations

import logging
from argparse import Namespace
from pathlib import Path

from mrkl.crypto.hashing import to_hex
from mrkl.merkle.merkle_proofs import MerkleProver
from mrkl.merkle.merkle_tree import compute_tree_depth
from mrkl.schemas.proof import ProofDocument, format_proof
from mrkl_cli.common import (
    EXIT_SUCCESS,
    parse_leaves,
    print_json,
    resolve_strategy,
    wants_json,
)


logger = logging.getLogger(__name__)


def batch_cmd(args: Namespace) -> int:
    """Execute the batch command."""
    strategy = resolve_strategy(args)
    leaves = parse_leaves(args.leaves)

    logger.info(f"Proving all {len(leaves)} leaves with {strategy.name}")
    root, proofs = MerkleProver.prove_all(leaves, strategy)
    documents = [
        ProofDocument.from_proof(proof, strategy.algorithm, strategy.leaf_mode)
        for proof in proofs
    ]

    if args.out_dir:
        out_dir = Path(args.out_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        for document in documents:
            path = out_dir / f"proof_{document.index}.json"
            path.write_text(document.model_dump_json(indent=2) + "\n")
        logger.info(f"Wrote {len(documents)} proof documents to {out_dir}")

    if wants_json(args):
        print_json({
            "root": to_hex(root),
            "depth": compute_tree_depth(len(leaves)),
            "proofs": [document.model_dump() for document in documents],
        })
    else:
        print(f"root: {to_hex(root)}")
        for proof in proofs:
            print(f"{proof.index}: {' '.join(format_proof(proof.elements))}".rstrip())
    return EXIT_SUCCESS
