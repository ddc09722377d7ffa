"""
mrkl - Merkle roots and inclusion proofs over pluggable digests.

Usage:
    from mrkl import HashCache, compute_root, verify_proof, get_strategy

    strategy = get_strategy("blake2", "rehash")
    root = compute_root(leaves, strategy)

    cache = HashCache.from_leaves(leaves, strategy)
    proof = cache.create_proof(1)
    assert verify_proof(leaves[1], proof, strategy) == root
"""

__version__ = "0.1.0"

from mrkl.merkle import (
    FunctionMerge,
    HashCache,
    InclusionProof,
    LeafRange,
    Left,
    Merge,
    MerkleProver,
    MerkleVerifier,
    ProofElem,
    Right,
    compute_root,
    create_proof,
    verify_proof,
)
from mrkl.crypto import DigestMerge, get_strategy
from mrkl.schemas import EmptyInputException, IndexOutOfRangeException, MrklException

__all__ = [
    "__version__",
    "FunctionMerge",
    "HashCache",
    "InclusionProof",
    "LeafRange",
    "Left",
    "Merge",
    "MerkleProver",
    "MerkleVerifier",
    "ProofElem",
    "Right",
    "compute_root",
    "create_proof",
    "verify_proof",
    "DigestMerge",
    "get_strategy",
    "EmptyInputException",
    "IndexOutOfRangeException",
    "MrklException",
]
