"""
CLI command modules.
"""

from mrkl_cli.commands import batch, digest, proof, root, verify

__all__ = ["batch", "digest", "proof", "root", "verify"]
