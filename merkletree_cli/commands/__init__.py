"""
CLI command modules and the helpers they share.
"""

from __future__ import annotations

from argparse import Namespace


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def wants_json(args: Namespace) -> bool:
    """True if --json was given or the configured output format is json."""
    if getattr(args, "json", False):
        return True
    config = getattr(args, "cli_config", None)
    return config is not None and config.default_output_format == "json"


def resolve_chunk_size(args: Namespace) -> int:
    """--chunk-size if given, else the configured chunk size."""
    if getattr(args, "chunk_size", None) is not None:
        return args.chunk_size
    config = getattr(args, "cli_config", None)
    return config.chunk_size if config is not None else 0
