"""
Tree Routes

Root computation, proof generation and proof verification over hex
encoded leaf digests.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from mrkl.crypto.hashing import from_hex, split_packed, to_hex
from mrkl.merkle.merkle_proofs import MerkleProver
from mrkl.merkle.merkle_tree import compute_root, compute_tree_depth, verify_proof
from mrkl.schemas.errors import ProofFormatException
from mrkl.schemas.proof import ProofDocument, proof_from_json
from mrkl_api.deps import resolve_strategy
from mrkl_api.models.requests import (
    LeavesFields,
    ProofRequest,
    ProofsRequest,
    RootRequest,
    VerifyRequest,
)
from mrkl_api.models.responses import ProofResponse, ProofsResponse, RootResponse, VerifyResponse


logger = logging.getLogger(__name__)

router = APIRouter(tags=["tree"])


def decode_leaves(request: LeavesFields) -> list[bytes]:
    """Leaf digests from either the hex list or the packed hex buffer."""
    if (request.leaves is None) == (request.leaves_packed is None):
        raise ProofFormatException(
            "exactly one of leaves and leaves_packed must be given",
            details={"fields": ["leaves", "leaves_packed"]},
        )
    if request.leaves_packed is not None:
        return split_packed(from_hex(request.leaves_packed))
    return [from_hex(leaf) for leaf in request.leaves]


@router.post("/root", response_model=RootResponse)
def root_endpoint(request: RootRequest) -> RootResponse:
    """Compute the Merkle root of the given leaves."""
    strategy = resolve_strategy(request)
    leaves = decode_leaves(request)

    root = compute_root(leaves, strategy)
    logger.info(f"Computed root over {len(leaves)} leaves with {strategy.name}")

    return RootResponse(
        ok=True,
        algorithm=strategy.algorithm,
        leaf_mode=strategy.leaf_mode,
        leaves=len(leaves),
        root=to_hex(root),
    )


@router.post("/proof", response_model=ProofResponse)
def proof_endpoint(request: ProofRequest) -> ProofResponse:
    """Create the inclusion proof of the leaf at request.index."""
    strategy = resolve_strategy(request)
    leaves = decode_leaves(request)

    proof = MerkleProver.prove(leaves, request.index, strategy)
    logger.info(f"Created proof for leaf {request.index} of {len(leaves)}")

    return ProofResponse(
        ok=True,
        root=to_hex(proof.root),
        proof=ProofDocument.from_proof(proof, strategy.algorithm, strategy.leaf_mode),
    )


@router.post("/proofs", response_model=ProofsResponse)
def proofs_endpoint(request: ProofsRequest) -> ProofsResponse:
    """Compute the root and the proof of every leaf from one tree build."""
    strategy = resolve_strategy(request)
    leaves = decode_leaves(request)

    root, proofs = MerkleProver.prove_all(leaves, strategy)
    logger.info(f"Created {len(proofs)} proofs with {strategy.name}")

    return ProofsResponse(
        ok=True,
        root=to_hex(root),
        depth=compute_tree_depth(len(leaves)),
        proofs=[
            ProofDocument.from_proof(p, strategy.algorithm, strategy.leaf_mode)
            for p in proofs
        ],
    )


@router.post("/verify", response_model=VerifyResponse)
def verify_endpoint(request: VerifyRequest) -> VerifyResponse:
    """
    Fold a proof back to the root it commits to.

    matches is only reported when the caller supplies a trusted root.
    """
    strategy = resolve_strategy(request)
    leaf = from_hex(request.leaf)
    elements = proof_from_json(request.proof)

    computed = verify_proof(leaf, elements, strategy)

    matches = None
    if request.root is not None:
        matches = computed == from_hex(request.root)
        if not matches:
            logger.warning(f"Proof does not reach the supplied root ({len(elements)} elements)")

    return VerifyResponse(ok=True, computed_root=to_hex(computed), matches=matches)
