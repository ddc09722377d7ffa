"""
Merkle - Merge Capability
The pluggable combining strategy every tree operation is parameterized over.

A strategy decides both how a leaf digest is finalized before it enters
the tree and how two child digests combine into their parent. This is
where second preimage protection lives (or deliberately does not):

    leaf(h) = H(h)              # rehash: leaves can't pass as inner nodes
    leaf(h) = h                 # identity: allows second preimages
    leaf(h) = H(0x00 || h)      # RFC 6962 style domain separation

Contract (Hard):
1. leaf() is applied exactly once per leaf, when it enters the tree.
   The value passed in is the raw digest the caller holds.
2. merge() combines two already-processed digests.
3. Both are pure: same input, same output, no hidden state. The hash
   cache and the uncached root computation must agree bit-for-bit.
4. Returned values are treated as immutable. Proof elements share them
   with the cache.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Protocol, TypeVar

H = TypeVar("H")


class Merge(Protocol[H]):
    """Combining strategy over digests of type H."""

    def leaf(self, leaf: H) -> H:
        """
        Compute the hash of a leaf node.

        The leaf passed in has already been hashed once by the caller.
        Implementations may transform it before inclusion.
        """
        ...

    def merge(self, left: H, right: H) -> H:
        """Compute the hash of an inner node from its two children."""
        ...


@dataclass(frozen=True)
class FunctionMerge(Generic[H]):
    """
    Merge capability built from a pair of plain callables.

    Example:
        >>> byte_sum = FunctionMerge(lambda a: a, lambda a, b: (a + b) % 256)
        >>> byte_sum.merge(200, 100)
        44
    """
    leaf_fn: Callable[[H], H]
    merge_fn: Callable[[H, H], H]

    def leaf(self, leaf: H) -> H:
        return self.leaf_fn(leaf)

    def merge(self, left: H, right: H) -> H:
        return self.merge_fn(left, right)


__all__ = [
    "Merge",
    "FunctionMerge",
]
