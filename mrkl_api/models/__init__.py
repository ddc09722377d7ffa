"""API request and response models."""

from mrkl_api.models.requests import (
    LeavesFields,
    ProofRequest,
    ProofsRequest,
    RootRequest,
    StrategyFields,
    VerifyRequest,
)
from mrkl_api.models.responses import (
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
    ProofResponse,
    ProofsResponse,
    RootResponse,
    VerifyResponse,
)

__all__ = [
    "LeavesFields",
    "ProofRequest",
    "ProofsRequest",
    "RootRequest",
    "StrategyFields",
    "VerifyRequest",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "ProofResponse",
    "ProofsResponse",
    "RootResponse",
    "VerifyResponse",
]
