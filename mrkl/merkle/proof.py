"""
Merkle - Proof Elements
Tagged sibling digests that make up an inclusion proof.

A proof is a list of elements ordered bottom-to-top: index 0 is the
leaf's immediate sibling, the last element is the sibling just below
the root. The tag says which side the *sibling* occupies:

    Left(s)  -> parent = merge(s, current)
    Right(s) -> parent = merge(current, s)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Generic, TypeVar

from mrkl.merkle.merge import Merge

H = TypeVar("H")


class Side(str, Enum):
    """Position of a sibling relative to the path being proven."""
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class ProofElem(Generic[H]):
    """Base class for a single proof element. Use Left or Right."""
    digest: H

    side: ClassVar[Side]

    def fold(self, merge: Merge[H], current: H) -> H:
        """Combine the running subroot with this sibling."""
        raise NotImplementedError


@dataclass(frozen=True)
class Left(ProofElem[H]):
    """The sibling sits on the left of the path."""

    side: ClassVar[Side] = Side.LEFT

    def fold(self, merge: Merge[H], current: H) -> H:
        return merge.merge(self.digest, current)


@dataclass(frozen=True)
class Right(ProofElem[H]):
    """The sibling sits on the right of the path."""

    side: ClassVar[Side] = Side.RIGHT

    def fold(self, merge: Merge[H], current: H) -> H:
        return merge.merge(current, self.digest)


def make_elem(side: Side, digest: H) -> ProofElem[H]:
    """Build the element class matching side."""
    if side is Side.LEFT:
        return Left(digest)
    return Right(digest)


__all__ = [
    "Side",
    "ProofElem",
    "Left",
    "Right",
    "make_elem",
]
