"""
Cryptographic primitives for Merkle tree construction.
"""
from .hashing import (
    HASH_ALGORITHM,
    HASH_SIZE,
    sha256,
    hash_data,
    hash_concat,
    next_power_of_2,
    to_hex,
    from_hex,
)

__all__ = [
    "HASH_ALGORITHM",
    "HASH_SIZE",
    "sha256",
    "hash_data",
    "hash_concat",
    "next_power_of_2",
    "to_hex",
    "from_hex",
]
