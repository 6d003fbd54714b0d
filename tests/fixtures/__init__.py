"""
Test fixtures package for merkletree tests.

Usage:
    from fixtures import example_data, REFERENCE_ROOTS

    def test_something():
        blocks = example_data(4)
"""

from .common import (
    REFERENCE_ROOTS,
    example_data,
    mutate_byte,
    write_blocks,
)

__all__ = [
    "REFERENCE_ROOTS",
    "example_data",
    "mutate_byte",
    "write_blocks",
]
