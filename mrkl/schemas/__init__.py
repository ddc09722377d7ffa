"""
Schemas - Errors & Wire Formats
File: __init__.py

Purpose: Export the error taxonomy. Proof serialization lives in
mrkl.schemas.proof and is imported from there, since it depends on the
crypto and merkle packages, which themselves raise these errors.
"""

from .errors import (
    EmptyInputException,
    ErrorCodes,
    HashFormatException,
    IndexOutOfRangeException,
    MrklError,
    MrklException,
    ProofFormatException,
    UnsupportedAlgorithmException,
)

__all__ = [
    "EmptyInputException",
    "ErrorCodes",
    "HashFormatException",
    "IndexOutOfRangeException",
    "MrklError",
    "MrklException",
    "ProofFormatException",
    "UnsupportedAlgorithmException",
]
