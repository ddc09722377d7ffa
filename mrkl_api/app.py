"""
FastAPI Application

Main application setup and configuration.

Usage:
    uvicorn mrkl_api.app:app --reload

    # Or run directly
    python -m mrkl_api.app
"""

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mrkl.schemas.errors import MrklException
from mrkl_api.errors import generic_error_handler, mrkl_error_handler
from mrkl_api.routes import health, tree


def _resolve_log_level() -> int:
    """Resolve log level from MRKL_LOG_LEVEL, defaulting to INFO."""
    raw = os.getenv("MRKL_LOG_LEVEL")
    return getattr(logging, (raw or "INFO").upper(), logging.INFO)


logging.basicConfig(
    level=_resolve_log_level(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="mrkl API",
        description="""
HTTP API for Merkle roots and inclusion proofs.

## Endpoints

- **POST /root** - Compute the root of a list of hex leaf digests
- **POST /proof** - Create the inclusion proof of one leaf
- **POST /proofs** - Root plus every proof from one tree build
- **POST /verify** - Recompute the root from a leaf and its proof
- **GET /health** - Health check

## Strategy

Every request may name `algorithm` (blake2, sha2, sha3) and `leaf_mode`
(rehash, identity, rfc6962). Omitted fields come from the runtime config.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(MrklException, mrkl_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    app.include_router(health.router)
    app.include_router(tree.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
