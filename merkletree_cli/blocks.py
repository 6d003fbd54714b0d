"""
Block loading for CLI commands.

Turns input files into the ordered list of data blocks a tree is built from.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence


logger = logging.getLogger(__name__)


def split_chunks(data: bytes, chunk_size: int) -> list[bytes]:
    """Split data into chunk_size-byte blocks; the last block may be shorter."""
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    return [data[i:i + chunk_size] for i in range(0, len(data), chunk_size)]


def load_blocks(paths: Sequence[str | Path], chunk_size: int = 0) -> list[bytes]:
    """
    Read data blocks from files.

    Args:
        paths: Input files, in block order
        chunk_size: 0 to use each file as one block; otherwise the files are
                    concatenated and split into chunk_size-byte blocks

    Returns:
        Ordered list of data blocks

    Raises:
        FileNotFoundError: If an input file does not exist
    """
    contents = []
    for path in paths:
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Input file not found: {path}")
        contents.append(path.read_bytes())

    if chunk_size == 0:
        blocks = contents
    else:
        blocks = split_chunks(b"".join(contents), chunk_size)

    logger.debug(f"Loaded {len(blocks)} block(s) from {len(contents)} file(s)")
    return blocks
