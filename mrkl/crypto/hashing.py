"""
Crypto - Hashing Utilities
Raw digest helpers and hex/packed encodings for leaf and node hashes.

This module provides:
- Digest functions over raw bytes (blake2s, sha256, sha3-256)
- Lookup of a digest function by algorithm name
- Hex encoding/decoding (optional 0x prefix accepted on input)
- Splitting of packed, fixed-size digest buffers

Determinism Notes:
- Raw bytes are hashed exactly as given
- Hex output is lowercase without prefix
"""
from __future__ import annotations

import hashlib
from typing import Callable

from mrkl.schemas.errors import HashFormatException, UnsupportedAlgorithmException


DigestFn = Callable[[bytes], bytes]


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def blake2s(data: bytes) -> bytes:
    """Compute the 32-byte, unkeyed BLAKE2s hash of raw bytes."""
    return hashlib.blake2s(data).digest()


def sha3_256(data: bytes) -> bytes:
    """Compute SHA3-256 hash of raw bytes."""
    return hashlib.sha3_256(data).digest()


# Algorithm names accepted by the CLI, API and config
DIGESTS: dict[str, DigestFn] = {
    "blake2": blake2s,
    "sha2": sha256,
    "sha3": sha3_256,
}

DIGEST_SIZE = 32


def get_digest(algorithm: str) -> DigestFn:
    """
    Look up a digest function by name.

    Raises:
        UnsupportedAlgorithmException: If the name is unknown
    """
    try:
        return DIGESTS[algorithm]
    except KeyError:
        raise UnsupportedAlgorithmException(algorithm, sorted(DIGESTS)) from None


def hash_text(text: str, algorithm: str = "blake2") -> bytes:
    """Digest a UTF-8 string into a leaf hash."""
    return get_digest(algorithm)(text.encode("utf-8"))


def to_hex(data: bytes) -> str:
    """
    Convert bytes to a lowercase hexadecimal string without prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        'deadbeef'
    """
    return data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert a hexadecimal string to bytes.

    A leading "0x" is tolerated.

    Raises:
        HashFormatException: On odd length or invalid hex characters

    Example:
        >>> from_hex("0xdeadbeef").hex()
        'deadbeef'
    """
    hex_content = hex_string[2:] if hex_string[:2] in ("0x", "0X") else hex_string

    if len(hex_content) % 2 != 0:
        raise HashFormatException(
            f"Hex string must have even length, got length {len(hex_content)}",
            value=hex_string,
        )

    # bytes.fromhex() skips whitespace; digests must not contain any
    if any(c.isspace() for c in hex_content):
        raise HashFormatException("Hex string must not contain whitespace", value=hex_string)

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise HashFormatException(
            f"Invalid hex characters in string: {e}",
            value=hex_string,
        ) from e


def split_packed(data: bytes, size: int = DIGEST_SIZE) -> list[bytes]:
    """
    Split a buffer of concatenated fixed-size digests.

    Raises:
        HashFormatException: If len(data) is not a multiple of size
    """
    if size <= 0 or len(data) % size != 0:
        raise HashFormatException(
            f"invalid length for packed {size} byte elements: {len(data)}"
        )
    return [data[i:i + size] for i in range(0, len(data), size)]


__all__ = [
    "DigestFn",
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
]
