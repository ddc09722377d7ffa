"""
Merkle - Hash Cache
Range-indexed store of every node digest for one leaf sequence.

Nodes are addressed by the leaf range they cover, not by pointers.
Building the cache costs one leaf() per leaf and one merge() per inner
node (O(n) total). Afterwards the root and the proof of any leaf are
plain lookups, so proving all n leaves costs O(n) instead of the
O(n log n) of recomputing the tree per leaf.

Cache Invariants (hold after from_leaves returns):
1. No two ranges partially overlap: any two are disjoint or nested.
2. Every singleton range [i, i+1) for i in [0, n) is present.
3. The full range [0, n) is present and equals compute_root(leaves).
4. No zero-length range is present; there are exactly 2n - 1 entries.

A cache is never mutated after construction, so it can be shared
read-only between threads proving leaves of the same sequence.
"""
from __future__ import annotations

import logging
import operator
from types import MappingProxyType
from typing import Generic, Iterator, Mapping, Sequence, TypeVar

from mrkl.merkle.merge import Merge
from mrkl.merkle.proof import Left, ProofElem, Right
from mrkl.merkle.ranges import LeafRange, split_range
from mrkl.schemas.errors import EmptyInputException, IndexOutOfRangeException


logger = logging.getLogger(__name__)

H = TypeVar("H")


class HashCache(Generic[H]):
    """
    Every node digest of a Merkle tree, keyed by leaf range.

    Example:
        >>> cache = HashCache.from_leaves(leaves, strategy)
        >>> root = cache.root()
        >>> proof = cache.create_proof(2)
    """

    def __init__(self, entries: Mapping[LeafRange, H], leaves_len: int) -> None:
        """
        Wrap already computed entries. Use from_leaves to build a cache.

        Raises:
            ValueError: If entries do not hold the 2n - 1 ranges of a tree
                over leaves_len leaves
        """
        if leaves_len < 1 or set(entries) != set(tree_ranges(leaves_len)):
            raise ValueError(
                f"Entries are not the {2 * leaves_len - 1} node ranges of a tree "
                f"over {leaves_len} leaves (got {len(entries)} entries)"
            )
        self._entries = dict(entries)
        self._leaves_len = leaves_len

    @classmethod
    def from_leaves(cls, leaves: Sequence[H], merge: Merge[H]) -> HashCache[H]:
        """
        Build the cache for a leaf sequence.

        Args:
            leaves: Raw leaf digests (leaf() has not been applied yet)
            merge: Combining strategy

        Returns:
            Fully populated HashCache

        Raises:
            EmptyInputException: If leaves is empty
        """
        if len(leaves) == 0:
            raise EmptyInputException()

        entries: dict[LeafRange, H] = {}
        full = LeafRange(0, len(leaves))
        entries[full] = _populate(entries, leaves, full, merge)

        logger.debug(f"Built hash cache: {len(leaves)} leaves, {len(entries)} entries")
        return cls(entries, len(leaves))

    @property
    def leaves_len(self) -> int:
        """Number of leaves the cache was built from."""
        return self._leaves_len

    @property
    def entries(self) -> Mapping[LeafRange, H]:
        """Read-only view of all cached (range, digest) pairs."""
        return MappingProxyType(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, leaf_range: object) -> bool:
        return leaf_range in self._entries

    def __iter__(self) -> Iterator[LeafRange]:
        return iter(self.ranges())

    def get(self, leaf_range: LeafRange) -> H:
        """Cached digest of the node covering leaf_range."""
        return self._entries[leaf_range]

    def ranges(self) -> list[LeafRange]:
        """All cached ranges ordered by (start, end)."""
        return sorted(self._entries)

    def root(self) -> H:
        """Get the precalculated Merkle root."""
        return self._entries[LeafRange(0, self._leaves_len)]

    def create_proof(self, index: int) -> list[ProofElem[H]]:
        """
        Get a proof of inclusion for the leaf at index.

        Args:
            index: 0-based leaf index; negative indices are not wrapped.
                Any integer-like value is accepted, floats are not.

        Returns:
            Sibling digests ordered bottom-to-top (empty for a single leaf)

        Raises:
            TypeError: If index is not an integer
            IndexOutOfRangeException: If index is not in [0, leaves_len)
        """
        index = operator.index(index)
        if not 0 <= index < self._leaves_len:
            raise IndexOutOfRangeException(index, self._leaves_len)

        proof: list[ProofElem[H]] = []
        self._populate_proof(proof, index, LeafRange(0, self._leaves_len))
        return proof

    def create_all_proofs(self) -> list[list[ProofElem[H]]]:
        """Proofs for every leaf, in leaf order."""
        return [self.create_proof(index) for index in range(self._leaves_len)]

    def _populate_proof(
        self,
        proof: list[ProofElem[H]],
        index: int,
        leaf_range: LeafRange,
    ) -> None:
        # Depth first: deeper siblings are appended before shallower ones.
        if leaf_range.is_leaf():
            return
        left, right = split_range(leaf_range)
        if index in left:
            self._populate_proof(proof, index, left)
            proof.append(Right(self._entries[right]))
        else:
            self._populate_proof(proof, index, right)
            proof.append(Left(self._entries[left]))

    def __repr__(self) -> str:
        return f"HashCache(leaves_len={self._leaves_len}, entries={len(self._entries)})"


def tree_ranges(leaves_len: int) -> list[LeafRange]:
    """Every node range of the tree over leaves_len leaves, root first."""
    ranges: list[LeafRange] = []
    pending = [LeafRange(0, leaves_len)]
    while pending:
        leaf_range = pending.pop()
        ranges.append(leaf_range)
        if not leaf_range.is_leaf():
            pending.extend(split_range(leaf_range))
    return ranges


def _populate(
    entries: dict[LeafRange, H],
    leaves: Sequence[H],
    leaf_range: LeafRange,
    merge: Merge[H],
) -> H:
    """
    Fill entries for every node strictly below leaf_range.

    Returns the digest of leaf_range itself without inserting it; the
    caller inserts it (the top-level caller inserts the root last).
    """
    if leaf_range.is_leaf():
        return merge.leaf(leaves[leaf_range.start])

    left, right = split_range(leaf_range)
    left_hash = _populate(entries, leaves, left, merge)
    right_hash = _populate(entries, leaves, right, merge)
    entries[left] = left_hash
    entries[right] = right_hash
    return merge.merge(left_hash, right_hash)


__all__ = [
    "HashCache",
    "tree_ranges",
]
