"""
API Request Models

Pydantic models for API request validation. Digests travel as hex
strings; algorithm and leaf mode fall back to the runtime config.
"""

from pydantic import BaseModel, Field


class StrategyFields(BaseModel):
    """Optional strategy selection shared by every request."""

    algorithm: str | None = Field(
        default=None,
        description="Digest algorithm: blake2, sha2, sha3 (default: from config)",
    )
    leaf_mode: str | None = Field(
        default=None,
        description="Leaf mode: rehash, identity, rfc6962 (default: from config)",
    )


class LeavesFields(StrategyFields):
    """
    Leaf input shared by the tree requests.

    Exactly one of leaves and leaves_packed must be given.
    """

    leaves: list[str] | None = Field(
        default=None,
        description="Ordered leaf digests (hex); must not be empty",
    )
    leaves_packed: str | None = Field(
        default=None,
        description="Ordered leaf digests as one hex string of concatenated 32 byte digests",
    )


class RootRequest(LeavesFields):
    """Request body for POST /root endpoint."""


class ProofRequest(LeavesFields):
    """Request body for POST /proof endpoint."""

    index: int = Field(..., description="0-based index of the leaf to prove")


class ProofsRequest(LeavesFields):
    """Request body for POST /proofs endpoint."""


class VerifyRequest(StrategyFields):
    """Request body for POST /verify endpoint."""

    leaf: str = Field(..., description="Raw leaf digest (hex)")
    proof: list[dict[str, str]] = Field(
        default_factory=list,
        description='Proof elements bottom-to-top: [{"Left": hex} | {"Right": hex}]',
    )
    root: str | None = Field(
        default=None,
        description="Trusted root (hex); when given, the response reports whether it matches",
    )
