"""
Schemas - Error Taxonomy
File: errors.py

Purpose: Standard error taxonomy for the mrkl library, CLI and API.
Defines both a Pydantic model for structured error communication
and Python exceptions for control flow.

Every exception here marks a caller contract violation. None of them is
retryable. A proof that folds to the wrong root is not an error and is
never reported through this module.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Tree construction & proof generation
    EMPTY_INPUT = "EMPTY_INPUT"
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"

    # Encoding & wire format
    HASH_FORMAT_ERROR = "HASH_FORMAT_ERROR"
    PROOF_FORMAT_ERROR = "PROOF_FORMAT_ERROR"

    # Strategy selection
    UNSUPPORTED_ALGORITHM = "UNSUPPORTED_ALGORITHM"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class MrklError(BaseModel):
    """
    Error model for structured error communication.

    Used by the API layer to serialize failures without leaking
    exception objects across the HTTP boundary.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.EMPTY_INPUT],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class MrklException(Exception):
    """
    Base exception for all mrkl errors.

    Carries structured error information and can be converted
    to MrklError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "MRKL_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> MrklError:
        """Convert this exception to a MrklError model."""
        return MrklError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class EmptyInputException(MrklException, ValueError):
    """Raised when a root or hash cache is requested for zero leaves."""

    def __init__(
        self,
        message: str = "Cannot build a Merkle tree from an empty leaf sequence",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.EMPTY_INPUT,
            details=details,
            retryable=False,
        )


class IndexOutOfRangeException(MrklException, IndexError):
    """Raised when a proof is requested for a leaf index outside [0, n)."""

    def __init__(
        self,
        index: int,
        leaves_len: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["index"] = index
        full_details["leaves_len"] = leaves_len
        super().__init__(
            message=f"Leaf index {index} out of range for {leaves_len} leaves",
            code=ErrorCodes.INDEX_OUT_OF_RANGE,
            details=full_details,
            retryable=False,
        )
        self.index = index
        self.leaves_len = leaves_len


class HashFormatException(MrklException, ValueError):
    """Raised when a digest cannot be decoded from its text form."""

    def __init__(
        self,
        message: str,
        value: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if value is not None:
            full_details["value"] = value
        super().__init__(
            message=message,
            code=ErrorCodes.HASH_FORMAT_ERROR,
            details=full_details,
            retryable=False,
        )


class ProofFormatException(MrklException, ValueError):
    """Raised when a serialized proof element is malformed."""

    def __init__(
        self,
        message: str,
        position: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if position is not None:
            full_details["position"] = position
        super().__init__(
            message=message,
            code=ErrorCodes.PROOF_FORMAT_ERROR,
            details=full_details,
            retryable=False,
        )


class UnsupportedAlgorithmException(MrklException, ValueError):
    """Raised when a digest algorithm or leaf mode name is unknown."""

    def __init__(
        self,
        name: str,
        supported: list[str],
        kind: str = "algorithm",
    ) -> None:
        super().__init__(
            message=f"{kind} must be one of: {', '.join(supported)} (got {name!r})",
            code=ErrorCodes.UNSUPPORTED_ALGORITHM,
            details={"name": name, "kind": kind, "supported": list(supported)},
            retryable=False,
        )
