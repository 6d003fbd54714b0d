"""
Common test fixtures shared by all test modules.

Provides the single-byte example data sets used by the reference root
vectors, plus small helpers for mutating blocks and writing them to disk.
"""

from pathlib import Path
from typing import Sequence


# Roots for example_data(n), SHA-256, lone nodes promoted unchanged
REFERENCE_ROOTS: dict[int, str] = {
    3: "773a93ac37ea78b3f14ac31872c83886b0a0f1fec562c4e848e023c889c2ce9f",
    4: "9675e04b4ba9dc81b06e81731e2d21caa2c95557a85dcfa3fff70c9ff0f30b2e",
    8: "0727b310f87099c1ba2ec0ba408def82c308237c8577f0bdfd2643e9cc6b7578",
}


def example_data(n: int) -> list[bytes]:
    """Blocks [b"\\x00", b"\\x01", ..., bytes([n - 1])]."""
    return [bytes([i]) for i in range(n)]


def mutate_byte(block: bytes, position: int = 0) -> bytes:
    """Flip the low bit of one byte; empty blocks become a single byte."""
    if not block:
        return b"\x00"
    mutated = bytearray(block)
    mutated[position] ^= 0x01
    return bytes(mutated)


def write_blocks(directory: Path, blocks: Sequence[bytes]) -> list[Path]:
    """Write each block to its own file and return the paths in order."""
    paths = []
    for i, block in enumerate(blocks):
        path = directory / f"block_{i:03d}.bin"
        path.write_bytes(block)
        paths.append(path)
    return paths
