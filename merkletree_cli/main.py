"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m merkletree_cli root FILE... [--chunk-size N] [--json]
    python -m merkletree_cli prove FILE... (--data PATH | --index N) [--out PATH]
    python -m merkletree_cli verify FILE... --root HEX [--json]
    python -m merkletree_cli verify-proof DATA PROOF [--root HEX] [--json]
    python -m merkletree_cli config --init

Global options --config, --log-level and --debug (traceback on errors) go
before the subcommand.

Environment Variables:
    MERKLETREE_LOG_LEVEL        Log level (default: INFO)
    MERKLETREE_LOG_FILE         Additional log file
    MERKLETREE_OUTPUT_FORMAT    human or json (default: human)
    MERKLETREE_CHUNK_SIZE       Block size in bytes, 0 = one block per file
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from merkletree_cli import __version__
from merkletree_cli.commands import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    prove,
    root,
    verify,
)
from merkletree_cli.config import get_default_config_template, load_config


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


def _add_block_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "files",
        nargs="+",
        help="Input files, in block order",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=None,
        help="Concatenate inputs and split into blocks of N bytes (default: one block per file)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="merkletree",
        description="Build Merkle trees over files, generate and verify inclusion proofs.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./merkletree.json or ~/.config/merkletree/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print a traceback on errors",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- root command ---
    root_parser = subparsers.add_parser(
        "root",
        help="Print the Merkle root of a set of files",
    )
    _add_block_arguments(root_parser)
    root_parser.add_argument("--json", action="store_true", help="JSON output")
    root_parser.set_defaults(func=root.root_cmd)

    # --- prove command ---
    prove_parser = subparsers.add_parser(
        "prove",
        help="Write an inclusion proof for one block",
    )
    _add_block_arguments(prove_parser)
    target = prove_parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--data", type=str, help="File whose contents form the block to prove")
    target.add_argument("--index", type=int, help="0-based position of the block to prove")
    prove_parser.add_argument(
        "--out", "-o",
        type=str,
        default=None,
        help="Output path for the proof document (default: stdout)",
    )
    prove_parser.set_defaults(func=prove.prove_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Check that files produce a given root",
    )
    _add_block_arguments(verify_parser)
    verify_parser.add_argument("--root", type=str, required=True, help="Expected root (hex)")
    verify_parser.add_argument("--json", action="store_true", help="JSON output")
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- verify-proof command ---
    verify_proof_parser = subparsers.add_parser(
        "verify-proof",
        help="Check one block against a proof document",
    )
    verify_proof_parser.add_argument("data", type=str, help="File holding the proven block")
    verify_proof_parser.add_argument("proof", type=str, help="Proof document (JSON)")
    verify_proof_parser.add_argument(
        "--root",
        type=str,
        default=None,
        help=(
            "Trusted root (hex). Without it the root stored in the proof document "
            "is used, which only checks the proof is self-consistent and does not "
            "prove membership under a trusted root"
        ),
    )
    verify_proof_parser.add_argument("--json", action="store_true", help="JSON output")
    verify_proof_parser.set_defaults(func=verify.verify_proof_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
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
        default="merkletree.json",
        help="Path for config file (default: merkletree.json)",
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
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.cli_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: merkletree config [--init|--show]")
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

    setup_logging(level=args.log_level or config.log_level, log_file=config.log_file)

    # Attach config to args for commands to use
    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if hasattr(args, "debug") and args.debug:
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
