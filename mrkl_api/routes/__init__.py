"""API route handlers."""

from mrkl_api.routes import health, tree

__all__ = ["health", "tree"]
