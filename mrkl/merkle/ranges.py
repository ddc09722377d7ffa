"""
Merkle - Leaf Ranges
Half-open leaf index ranges and the split rule that defines tree shape.

Every component that partitions leaves goes through this module, so the
uncached root computation and the hash cache always agree on tree shape.

Split Rule (Hard Contract):
- A range of length n > 1 splits into a left part of length ceil(n/2)
  and a right part of length floor(n/2).
- The left part immediately precedes the right part.
- Ranges of length 1 are leaves and are never split.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, order=True)
class LeafRange:
    """
    Half-open interval [start, end) over leaf indices.

    Identifies both a leaf subsequence and the tree node covering it.
    Hashable and ordered by (start, end), so it can key the hash cache.
    """
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.start <= index < self.end

    def is_leaf(self) -> bool:
        return self.end - self.start == 1

    def overlaps(self, other: LeafRange) -> bool:
        """True if the two ranges share at least one index."""
        return max(self.start, other.start) < min(self.end, other.end)

    def covers(self, other: LeafRange) -> bool:
        """True if other lies entirely inside this range."""
        return self.start <= other.start and other.end <= self.end

    def __repr__(self) -> str:
        return f"[{self.start}, {self.end})"


def split_point(start: int, end: int) -> int:
    """Index where [start, end) is cut: the left part gets the extra leaf."""
    return start + (end - start + 1) // 2


def split_range(leaf_range: LeafRange) -> tuple[LeafRange, LeafRange]:
    """
    Split a range into its left and right child ranges.

    Args:
        leaf_range: Range of length >= 2

    Returns:
        (left, right) with len(left) == ceil(n/2), len(right) == floor(n/2)

    Raises:
        ValueError: If the range has fewer than two leaves

    Example:
        >>> split_range(LeafRange(0, 5))
        ([0, 3), [3, 5))
    """
    if len(leaf_range) < 2:
        raise ValueError(
            f"Cannot split range {leaf_range!r} of length {len(leaf_range)}"
        )
    mid = split_point(leaf_range.start, leaf_range.end)
    return LeafRange(leaf_range.start, mid), LeafRange(mid, leaf_range.end)


def split_sequence(items: Sequence[T]) -> tuple[Sequence[T], Sequence[T]]:
    """
    Split a sequence the same way split_range splits [0, len(items)).

    Used by the uncached root computation, which works on slices
    instead of index ranges.
    """
    mid = split_point(0, len(items))
    return items[:mid], items[mid:]


__all__ = [
    "LeafRange",
    "split_point",
    "split_range",
    "split_sequence",
]
