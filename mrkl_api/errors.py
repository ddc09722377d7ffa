"""
API Error Handling

Standardized error handling for the API. Library contract violations
(MrklException) become 400 responses carrying the library error code;
anything else is a 500 that does not leak internals.
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from mrkl.schemas.errors import MrklException
from mrkl_api.models.responses import ErrorDetail, ErrorResponse


def error_response(code: str, message: str, details: dict | None = None) -> ErrorResponse:
    return ErrorResponse(
        ok=False,
        error=ErrorDetail(
            code=code,
            message=message,
            details=details or {},
        ),
    )


async def mrkl_error_handler(request: Request, exc: MrklException) -> JSONResponse:
    """Handle library contract violations (empty input, bad index, bad hex)."""
    error = exc.to_error_model()
    return JSONResponse(
        status_code=400,
        content=error_response(error.code, error.message, error.details).model_dump(),
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    return JSONResponse(
        status_code=500,
        content=error_response(
            "INTERNAL_ERROR",
            "An unexpected error occurred",
            {"type": type(exc).__name__},
        ).model_dump(),
    )
