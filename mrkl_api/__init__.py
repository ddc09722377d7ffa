"""
mrkl HTTP API (FastAPI)

HTTP interface to root computation, proof generation and verification:
- POST /root - Compute a Merkle root
- POST /proof - Create the inclusion proof of one leaf
- POST /proofs - Root and every proof from one tree build
- POST /verify - Fold a proof back to its root
- GET /health - Health check

Usage:
    uvicorn mrkl_api.app:app --reload
"""

__version__ = "0.1.0"
