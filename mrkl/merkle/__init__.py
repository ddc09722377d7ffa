"""
Merkle Tree and Inclusion Proofs
Deterministic root computation, cached tree construction and
proof generation/verification over a pluggable combining strategy.

This package provides:
- LeafRange / split_range: the left-heavy split that fixes tree shape
- Merge / FunctionMerge: the combining strategy contract
- compute_root: uncached root computation
- HashCache: every node digest keyed by leaf range
- create_proof / verify_proof: inclusion proofs (Left/Right elements)
- MerkleProver / MerkleVerifier: class wrappers and batch proving

Usage:
    from mrkl.merkle import HashCache, verify_proof
    from mrkl.crypto import get_strategy

    strategy = get_strategy("blake2", "rehash")
    cache = HashCache.from_leaves(leaves, strategy)

    root = cache.root()
    proof = cache.create_proof(2)

    assert verify_proof(leaves[2], proof, strategy) == root
"""
from .ranges import (
    LeafRange,
    split_point,
    split_range,
    split_sequence,
)

from .merge import (
    Merge,
    FunctionMerge,
)

from .proof import (
    Side,
    ProofElem,
    Left,
    Right,
    make_elem,
)

from .hash_cache import HashCache

from .merkle_tree import (
    compute_root,
    create_proof,
    verify_proof,
    compute_tree_depth,
)

from .merkle_proofs import (
    InclusionProof,
    MerkleProver,
    MerkleVerifier,
)


__all__ = [
    # Ranges
    "LeafRange",
    "split_point",
    "split_range",
    "split_sequence",
    # Strategy contract
    "Merge",
    "FunctionMerge",
    # Proof elements
    "Side",
    "ProofElem",
    "Left",
    "Right",
    "make_elem",
    # Core functions
    "HashCache",
    "compute_root",
    "create_proof",
    "verify_proof",
    "compute_tree_depth",
    # Convenience classes
    "InclusionProof",
    "MerkleProver",
    "MerkleVerifier",
]
