"""
mrkl CLI

Command-line interface for computing Merkle roots and proofs.

Usage:
    python -m mrkl_cli root <leaf>...
    python -m mrkl_cli proof <index> <leaf>...
    python -m mrkl_cli verify <leaf> <root> [<elem>...]
    python -m mrkl_cli verify-doc proof.json [--root <root>]
    python -m mrkl_cli batch <leaf>...
    python -m mrkl_cli digest <text>...
"""

__version__ = "0.1.0"
