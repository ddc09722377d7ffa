"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m mrkl_cli [--alg ALG] [--leaf-mode MODE] root <leaf>...
    python -m mrkl_cli proof <index> <leaf>... [--json] [--out PATH]
    python -m mrkl_cli verify <leaf> <root> [<elem>...] [--json]
    python -m mrkl_cli verify-doc <proof.json> --root <root>
    python -m mrkl_cli batch <leaf>... [--json] [--out-dir DIR]
    python -m mrkl_cli digest <text>...
    python -m mrkl_cli config --init

Environment Variables:
    MRKL_ALGORITHM       Digest algorithm: blake2, sha2, sha3 (default: blake2)
    MRKL_LEAF_MODE       Leaf mode: rehash, identity, rfc6962 (default: rehash)
    MRKL_LOG_LEVEL       Log level (default: INFO)
    MRKL_LOG_FILE        Also log to this file
    MRKL_OUTPUT_FORMAT   human or json (default: human)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from mrkl.config.runtime import get_default_config_template, load_config
from mrkl.crypto.hashing import DIGESTS
from mrkl.crypto.strategies import LEAF_MODES
from mrkl.schemas.errors import MrklException
from mrkl_cli.commands import batch, digest, proof, root, verify
from mrkl_cli.common import EXIT_RUNTIME_ERROR, EXIT_SUCCESS


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )


def _leaf_index(value: str) -> int:
    index = int(value)
    if index < 0:
        raise argparse.ArgumentTypeError(f"leaf index must be non-negative, got {index}")
    return index


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="mrkl",
        description="Compute Merkle roots, create inclusion proofs and verify them.",
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s 0.1.0"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./mrkl.json or ~/.config/mrkl/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--alg", "-a",
        type=str,
        default=None,
        choices=sorted(DIGESTS),
        help="Digest algorithm (overrides config)",
    )
    parser.add_argument(
        "--leaf-mode",
        type=str,
        default=None,
        choices=list(LEAF_MODES),
        help="Leaf finalization: rehash (second preimage resistant), identity, rfc6962",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- root command ---
    root_parser = subparsers.add_parser(
        "root",
        help="Compute a Merkle root",
        description="Compute the root over an ordered list of hex leaf digests.",
    )
    root_parser.add_argument("leaves", nargs="+", help="Ordered list of leaves (hex)")
    root_parser.add_argument("--json", action="store_true", help="JSON output")
    root_parser.set_defaults(func=root.root_cmd)

    # --- proof command ---
    proof_parser = subparsers.add_parser(
        "proof",
        help="Create a proof",
        description="Create the inclusion proof for the leaf at INDEX.",
    )
    proof_parser.add_argument(
        "index",
        type=_leaf_index,
        help="Index of the leaf for which an inclusion proof will be generated",
    )
    proof_parser.add_argument(
        "leaves",
        nargs="+",
        help="Original list of leaves (hex). Required for proof generation.",
    )
    proof_parser.add_argument("--out", "-o", type=str, default=None, help="Also write the proof document here")
    proof_parser.add_argument("--json", action="store_true", help="Print a JSON proof document")
    proof_parser.set_defaults(func=proof.proof_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify a proof",
        description="Recompute the root from LEAF and PROOF and compare it with ROOT.",
    )
    verify_parser.add_argument("leaf", help="Leaf hash we want to verify (hex)")
    verify_parser.add_argument("root", help="Merkle root (hex)")
    verify_parser.add_argument("proof", nargs="*", help="'l' or 'r' prefixed proof elements")
    verify_parser.add_argument("--json", action="store_true", help="JSON output")
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- verify-doc command ---
    verify_doc_parser = subparsers.add_parser(
        "verify-doc",
        help="Verify a JSON proof document",
        description="Verify a proof document written by `mrkl proof --out`.",
    )
    verify_doc_parser.add_argument("doc_path", help="Path to proof document")
    verify_doc_parser.add_argument(
        "--root",
        type=str,
        default=None,
        help="Trusted root (hex); the root stored in the document is never trusted",
    )
    verify_doc_parser.add_argument("--json", action="store_true", help="JSON output")
    verify_doc_parser.set_defaults(func=verify.verify_doc_cmd)

    # --- batch command ---
    batch_parser = subparsers.add_parser(
        "batch",
        help="Compute the root and every proof at once",
        description="Build the tree once and emit the root plus the proof of every leaf.",
    )
    batch_parser.add_argument("leaves", nargs="+", help="Ordered list of leaves (hex)")
    batch_parser.add_argument("--out-dir", type=str, default=None, help="Write proof_<i>.json documents here")
    batch_parser.add_argument("--json", action="store_true", help="JSON output")
    batch_parser.set_defaults(func=batch.batch_cmd)

    # --- digest command ---
    digest_parser = subparsers.add_parser(
        "digest",
        help="Hash text into leaf digests",
        description="Hash each UTF-8 string with the configured algorithm.",
    )
    digest_parser.add_argument("texts", nargs="+", help="Strings to hash")
    digest_parser.add_argument("--json", action="store_true", help="JSON output")
    digest_parser.set_defaults(func=digest.digest_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="mrkl.json",
        help="Path for config file (default: mrkl.json)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("You can also use environment variables (MRKL_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.cli_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: mrkl config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=config.log_file)

    # Attach config to args for commands to use
    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except MrklException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if log_level.upper() == "DEBUG":
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
