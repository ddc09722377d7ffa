"""
API Response Models

Pydantic models for API response serialization.
"""

from typing import Any

from pydantic import BaseModel, Field

from mrkl.schemas.proof import ProofDocument


class HealthResponse(BaseModel):
    """Response for GET /health endpoint."""

    ok: bool = True
    service: str = "mrkl-api"
    version: str = "v1"


class RootResponse(BaseModel):
    """Response for POST /root endpoint."""

    ok: bool = True
    algorithm: str = Field(..., description="Digest algorithm used")
    leaf_mode: str = Field(..., description="Leaf mode used")
    leaves: int = Field(..., description="Number of leaves")
    root: str = Field(..., description="Merkle root (hex)")


class ProofResponse(BaseModel):
    """Response for POST /proof endpoint."""

    ok: bool = True
    root: str = Field(..., description="Merkle root (hex)")
    proof: ProofDocument = Field(..., description="Inclusion proof of the requested leaf")


class ProofsResponse(BaseModel):
    """Response for POST /proofs endpoint."""

    ok: bool = True
    root: str = Field(..., description="Merkle root (hex)")
    depth: int = Field(..., description="Tree depth, leaf level included")
    proofs: list[ProofDocument] = Field(default_factory=list)


class VerifyResponse(BaseModel):
    """Response for POST /verify endpoint."""

    ok: bool = True
    computed_root: str = Field(..., description="Root the proof commits to (hex)")
    matches: bool | None = Field(
        default=None,
        description="Whether computed_root equals the supplied root (absent when no root was given)",
    )


class ErrorDetail(BaseModel):
    """Detailed error information."""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Standard error response."""

    ok: bool = False
    error: ErrorDetail = Field(..., description="Error details")
