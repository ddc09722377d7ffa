"""
Crypto - Merge Strategies
Concrete combining strategies over hashlib digests.

Leaf Modes:
- rehash:   leaf = H(h),          node = H(l || r)
            Leaf hashes are double-hashed so a leaf can never be
            reinterpreted as an inner node (second preimage resistant).
- identity: leaf = h,             node = H(l || r)
            Leaves enter the tree unchanged. Allows second preimages.
- rfc6962:  leaf = H(0x00 || h),  node = H(0x01 || l || r)
            Domain separation as described in RFC 6962.

All strategies operate on bytes and are stateless, so one instance can
be shared freely.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from mrkl.crypto.hashing import DigestFn, get_digest
from mrkl.schemas.errors import UnsupportedAlgorithmException


LEAF_MODE_REHASH = "rehash"
LEAF_MODE_IDENTITY = "identity"
LEAF_MODE_RFC6962 = "rfc6962"

LEAF_MODES: tuple[str, ...] = (LEAF_MODE_REHASH, LEAF_MODE_IDENTITY, LEAF_MODE_RFC6962)

DEFAULT_ALGORITHM = "blake2"
DEFAULT_LEAF_MODE = LEAF_MODE_REHASH

# RFC 6962 section 2.1 domain separation prefixes
LEAF_PREFIX = b"\x00"
NODE_PREFIX = b"\x01"


@dataclass(frozen=True)
class DigestMerge:
    """
    Merge capability over a named hashlib digest.

    Example:
        >>> strategy = DigestMerge("blake2", "rehash")
        >>> strategy.leaf(leaf_hash) == blake2s(leaf_hash)
        True
    """
    algorithm: str = DEFAULT_ALGORITHM
    leaf_mode: str = DEFAULT_LEAF_MODE
    _digest: DigestFn = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.leaf_mode not in LEAF_MODES:
            raise UnsupportedAlgorithmException(
                self.leaf_mode, list(LEAF_MODES), kind="leaf mode"
            )
        # frozen dataclass: bypass __setattr__ for the derived field
        object.__setattr__(self, "_digest", get_digest(self.algorithm))

    def leaf(self, leaf: bytes) -> bytes:
        if self.leaf_mode == LEAF_MODE_IDENTITY:
            return leaf
        if self.leaf_mode == LEAF_MODE_RFC6962:
            return self._digest(LEAF_PREFIX + leaf)
        return self._digest(leaf)

    def merge(self, left: bytes, right: bytes) -> bytes:
        if self.leaf_mode == LEAF_MODE_RFC6962:
            return self._digest(NODE_PREFIX + left + right)
        return self._digest(left + right)

    @property
    def name(self) -> str:
        return f"{self.algorithm}/{self.leaf_mode}"


def get_strategy(
    algorithm: str = DEFAULT_ALGORITHM,
    leaf_mode: str = DEFAULT_LEAF_MODE,
) -> DigestMerge:
    """
    Resolve a strategy by algorithm and leaf mode names.

    Raises:
        UnsupportedAlgorithmException: If either name is unknown
    """
    return DigestMerge(algorithm=algorithm, leaf_mode=leaf_mode)


__all__ = [
    "LEAF_MODE_REHASH",
    "LEAF_MODE_IDENTITY",
    "LEAF_MODE_RFC6962",
    "LEAF_MODES",
    "DEFAULT_ALGORITHM",
    "DEFAULT_LEAF_MODE",
    "DigestMerge",
    "get_strategy",
]
