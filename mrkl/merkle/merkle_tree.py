"""
Merkle - Tree Functions
Root computation, proof generation and proof verification.

Canonical Tree Rules (Hard Contracts):
1. Leaves are taken in the order given; nothing is sorted or deduplicated.
2. A single leaf: root = merge.leaf(leaf).
3. More leaves: split left-heavy (see ranges.py), root = merge(left, right).
4. No padding: an odd leaf is promoted, never duplicated.
5. Empty leaf sequences are a contract violation (EmptyInputException).

Verification returns the recomputed root. Comparing it with a trusted
root is the caller's decision; a mismatch is a negative outcome, not an
error.
"""
from __future__ import annotations

from typing import Sequence, TypeVar

from mrkl.merkle.hash_cache import HashCache
from mrkl.merkle.merge import Merge
from mrkl.merkle.proof import ProofElem
from mrkl.merkle.ranges import split_sequence
from mrkl.schemas.errors import EmptyInputException

H = TypeVar("H")


def compute_root(leaves: Sequence[H], merge: Merge[H]) -> H:
    """
    Deterministically compute a Merkle root for an ordered list of leaves.

    Uses no cache; prefer HashCache when proofs are needed as well.

    Args:
        leaves: Raw leaf digests, order matters
        merge: Combining strategy

    Returns:
        The root digest

    Raises:
        EmptyInputException: If leaves is empty

    Example:
        >>> byte_sum = FunctionMerge(lambda a: a, lambda a, b: (a + b) % 256)
        >>> compute_root([0, 1, 2, 3, 4, 5], byte_sum)
        15
    """
    if len(leaves) == 0:
        raise EmptyInputException()
    return _compute_root(leaves, merge)


def _compute_root(leaves: Sequence[H], merge: Merge[H]) -> H:
    if len(leaves) == 1:
        return merge.leaf(leaves[0])
    left, right = split_sequence(leaves)
    return merge.merge(_compute_root(left, merge), _compute_root(right, merge))


def create_proof(index: int, leaves: Sequence[H], merge: Merge[H]) -> list[ProofElem[H]]:
    """
    Create the proof of inclusion for the indexed leaf.

    Builds a throwaway HashCache. To prove several leaves of the same
    sequence, build one HashCache and call create_proof on it instead.

    Raises:
        EmptyInputException: If leaves is empty
        IndexOutOfRangeException: If index is not in [0, len(leaves))
    """
    return HashCache.from_leaves(leaves, merge).create_proof(index)


def verify_proof(leaf: H, proof: Sequence[ProofElem[H]], merge: Merge[H]) -> H:
    """
    Calculate the expected Merkle root given a leaf and its proof.

    Args:
        leaf: The raw leaf digest, exactly as originally supplied
              (merge.leaf() is applied here)
        proof: Proof elements, bottom-to-top
        merge: Combining strategy the tree was built with

    Returns:
        The root the proof commits to; the leaf is proven iff this equals
        the trusted root
    """
    current = merge.leaf(leaf)
    for elem in proof:
        current = elem.fold(merge, current)
    return current


def compute_tree_depth(num_leaves: int) -> int:
    """
    Number of levels of a tree over num_leaves leaves, leaf level included.

    The longest proof in such a tree has compute_tree_depth(n) - 1 elements.
    A single leaf has depth 1, two leaves depth 2, three or four depth 3.
    Returns 0 for an empty tree.
    """
    if num_leaves <= 0:
        return 0
    return 1 + (num_leaves - 1).bit_length()


__all__ = [
    "compute_root",
    "create_proof",
    "verify_proof",
    "compute_tree_depth",
]
