"""
Crypto utilities.

Digest helpers and the concrete Merge strategies built on them.
"""
from .hashing import (
    DIGESTS,
    DIGEST_SIZE,
    sha256,
    blake2s,
    sha3_256,
    get_digest,
    hash_text,
    to_hex,
    from_hex,
    split_packed,
)

from .strategies import (
    LEAF_MODES,
    DEFAULT_ALGORITHM,
    DEFAULT_LEAF_MODE,
    DigestMerge,
    get_strategy,
)

__all__ = [
    "DIGESTS",
    "DIGEST_SIZE",
    "sha256",
    "blake2s",
    "sha3_256",
    "get_digest",
    "hash_text",
    "to_hex",
    "from_hex",
    "split_packed",
    "LEAF_MODES",
    "DEFAULT_ALGORITHM",
    "DEFAULT_LEAF_MODE",
    "DigestMerge",
    "get_strategy",
]
