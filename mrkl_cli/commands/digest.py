"""
CLI Digest Command

Hash raw UTF-8 strings into leaf digests with the configured algorithm.

Usage:
    mrkl digest <text>... [--json]
"""

from __future__ import annotations

from argparse import Namespace

from mrkl.crypto.hashing import hash_text, to_hex
from mrkl_cli.common import EXIT_SUCCESS, print_json, resolve_strategy, wants_json


def digest_cmd(args: Namespace) -> int:
    """Execute the digest command."""
    algorithm = resolve_strategy(args).algorithm
    digests = [to_hex(hash_text(text, algorithm)) for text in args.texts]

    if wants_json(args):
        print_json({"algorithm": algorithm, "digests": digests})
    else:
        for digest in digests:
            print(digest)
    return EXIT_SUCCESS
