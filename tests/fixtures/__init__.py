"""
Test fixtures package for mrkl tests.

This package provides merge strategies and leaf factories for tests:
- merges.py: small, transparent Merge implementations (byte sum,
  shape-revealing string merge, call counting wrapper)
- leaves.py: digest leaf factories and the known blake2s vectors

Usage:
    from fixtures import SumMerge, make_text_leaves

    def test_something():
        leaves = make_text_leaves(["1", "2", "3"])
"""

from .merges import (
    SumMerge,
    ShapeMerge,
    CountingMerge,
)

from .leaves import (
    VECTOR_TEXTS,
    VECTOR_ROOT,
    VECTOR_PROOFS,
    make_text_leaves,
    make_numbered_leaves,
)

__all__ = [
    # Merges
    "SumMerge",
    "ShapeMerge",
    "CountingMerge",
    # Leaves
    "VECTOR_TEXTS",
    "VECTOR_ROOT",
    "VECTOR_PROOFS",
    "make_text_leaves",
    "make_numbered_leaves",
]
