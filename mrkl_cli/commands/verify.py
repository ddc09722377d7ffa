"""
CLI Verify Commands

Fold a proof back to a root and compare it with a trusted root.

Usage:
    mrkl verify <leaf> <root> [<elem>...] [--json]
    mrkl verify-doc <proof.json> --root <root> [--json]

A mismatch is a verification outcome, not an error: it exits with
EXIT_VERIFICATION_FAILED and prints the root the proof actually
commits to.
"""

from __future__ import annotations

import logging
import sys
from argparse import Namespace
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Sequence

from pydantic import ValidationError

from mrkl.crypto.hashing import from_hex, to_hex
from mrkl.crypto.strategies import DigestMerge, get_strategy
from mrkl.merkle.merkle_tree import verify_proof
from mrkl.merkle.proof import ProofElem
from mrkl.schemas.proof import ProofDocument, parse_proof
from mrkl_cli.common import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
    print_json,
    resolve_strategy,
    wants_json,
)


logger = logging.getLogger(__name__)


@dataclass
class VerifySummary:
    """Summary of a proof verification for CLI output."""
    ok: bool = False
    algorithm: str = ""
    leaf_mode: str = ""
    leaf: str = ""
    expected_root: str = ""
    computed_root: str = ""
    proof_length: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def run_verification(
    leaf: bytes,
    expected_root: bytes,
    proof: Sequence[ProofElem[bytes]],
    strategy: DigestMerge,
) -> VerifySummary:
    """Recompute the root from leaf and proof and compare."""
    computed = verify_proof(leaf, proof, strategy)
    return VerifySummary(
        ok=computed == expected_root,
        algorithm=strategy.algorithm,
        leaf_mode=strategy.leaf_mode,
        leaf=to_hex(leaf),
        expected_root=to_hex(expected_root),
        computed_root=to_hex(computed),
        proof_length=len(proof),
    )


def print_summary_human(summary: VerifySummary) -> None:
    if summary.ok:
        print(f"ok: leaf {summary.leaf} is included in {summary.expected_root}")
    else:
        print("mismatch: proof does not lead to the expected root")
        print(f"  expected: {summary.expected_root}")
        print(f"  computed: {summary.computed_root}")


def emit(args: Namespace, summary: VerifySummary) -> int:
    if wants_json(args):
        print_json(summary.to_dict())
    else:
        print_summary_human(summary)

    if not summary.ok:
        logger.warning(f"Verification failed: computed root {summary.computed_root}")
        return EXIT_VERIFICATION_FAILED
    return EXIT_SUCCESS


def verify_cmd(args: Namespace) -> int:
    """Execute the verify command."""
    strategy = resolve_strategy(args)
    leaf = from_hex(args.leaf)
    root = from_hex(args.root)
    proof = parse_proof(args.proof)

    logger.info(f"Verifying {len(proof)}-element proof with {strategy.name}")
    return emit(args, run_verification(leaf, root, proof, strategy))


def verify_doc_cmd(args: Namespace) -> int:
    """Execute the verify-doc command on a ProofDocument JSON file."""
    doc_path = Path(args.doc_path)
    if not doc_path.exists():
        print(f"Error: Proof document not found: {doc_path}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    try:
        document = ProofDocument.model_validate_json(doc_path.read_text())
    except ValidationError as e:
        print(f"Error: Invalid proof document: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    strategy = get_strategy(document.algorithm, document.leaf_mode)
    proof = document.to_proof()

    # the stored root is self-attested, never a basis for "ok"
    if args.root is None:
        computed = to_hex(verify_proof(proof.leaf, proof.elements, strategy))
        print(
            f"Error: no trusted root given (pass --root); the document commits to {computed}",
            file=sys.stderr,
        )
        return EXIT_RUNTIME_ERROR

    expected = from_hex(args.root)
    return emit(args, run_verification(proof.leaf, expected, proof.elements, strategy))
