"""
Merkle - Prover and Verifier Wrappers
Class-based interface over the tree functions, plus batch proving.

This module provides:
- InclusionProof: leaf, index, proof elements and root bundled together
- MerkleProver: single-leaf and batch proof generation
- MerkleVerifier: folds an InclusionProof back to its root

Batch proving builds one HashCache and reads every proof out of it,
which costs n - 1 merges in total rather than n - 1 per leaf.
"""
from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from mrkl.merkle.hash_cache import HashCache
from mrkl.merkle.merge import Merge
from mrkl.merkle.merkle_tree import compute_root, verify_proof
from mrkl.merkle.proof import ProofElem

H = TypeVar("H")


@dataclass(frozen=True)
class InclusionProof(Generic[H]):
    """
    A Merkle inclusion proof for a single leaf.

    Attributes:
        leaf: The raw leaf digest being proven
        index: 0-based index of the leaf in the original leaf list
        elements: Tagged sibling digests, bottom-to-top (stored as a tuple)
        root: Root of the tree the proof was generated from
    """
    leaf: H
    index: int
    elements: tuple[ProofElem[H], ...] = ()
    root: H | None = None

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"Leaf index must be non-negative, got {self.index}")
        # frozen dataclass: bypass __setattr__ to store any sequence as a tuple
        object.__setattr__(self, "elements", tuple(self.elements))

    def __len__(self) -> int:
        return len(self.elements)


class MerkleProver:
    """
    Convenience class for generating Merkle proofs.

    Example:
        >>> root, proofs = MerkleProver.prove_all(leaves, strategy)
        >>> all(MerkleVerifier.verify(p, strategy) == root for p in proofs)
        True
    """

    @staticmethod
    def prove(leaves: Sequence[H], index: int, merge: Merge[H]) -> InclusionProof[H]:
        """
        Generate an inclusion proof for the leaf at index.

        Raises:
            EmptyInputException: If leaves is empty
            IndexOutOfRangeException: If index is out of range
        """
        cache = HashCache.from_leaves(leaves, merge)
        return _proof_from_cache(cache, leaves, index)

    @staticmethod
    def prove_all(
        leaves: Sequence[H],
        merge: Merge[H],
    ) -> tuple[H, list[InclusionProof[H]]]:
        """
        Compute the root and the proof of every leaf from one cache build.

        Returns:
            (root, proofs) where proofs[i] proves leaves[i]

        Raises:
            EmptyInputException: If leaves is empty
        """
        cache = HashCache.from_leaves(leaves, merge)
        proofs = [_proof_from_cache(cache, leaves, i) for i in range(len(leaves))]
        return cache.root(), proofs

    @staticmethod
    def compute_root(leaves: Sequence[H], merge: Merge[H]) -> H:
        """Compute the Merkle root without building a cache."""
        return compute_root(leaves, merge)


class MerkleVerifier:
    """Convenience class for verifying Merkle proofs."""

    @staticmethod
    def verify(proof: InclusionProof[H], merge: Merge[H]) -> H:
        """
        Fold a proof back up to the root it commits to.

        The root carried by the proof is ignored: a proof cannot vouch
        for itself. Compare the result with a root obtained elsewhere.
        """
        return verify_proof(proof.leaf, proof.elements, merge)


def _proof_from_cache(
    cache: HashCache[H],
    leaves: Sequence[H],
    index: int,
) -> InclusionProof[H]:
    index = operator.index(index)
    elements = cache.create_proof(index)
    return InclusionProof(
        leaf=leaves[index],
        index=index,
        elements=elements,
        root=cache.root(),
    )


__all__ = [
    "InclusionProof",
    "MerkleProver",
    "MerkleVerifier",
]
