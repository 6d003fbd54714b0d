"""
Hashing Utilities
Digest primitives used for Merkle leaves and internal nodes.

This module provides:
- SHA-256 hashing for raw data blocks (leaf hashes)
- Concatenation hashing for internal nodes
- Lowercase hex encoding/decoding for interoperability
- next_power_of_2 for the flat tree layout

Digest Rules (fixed for interoperability):
1. Leaf hash: sha256(block)
2. Internal node: sha256(left + right), raw 32-byte concatenation
3. No domain-separation prefixes
"""
from __future__ import annotations

import hashlib


# Digest identifier used in proof documents
HASH_ALGORITHM: str = "sha256"

# Size in bytes of every hash produced by this module
HASH_SIZE: int = 32


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def hash_data(data: bytes) -> bytes:
    """
    Hash one data block into a leaf hash.

    Any byte sequence is valid, including the empty one.

    Args:
        data: Raw data block

    Returns:
        32-byte leaf hash
    """
    return sha256(data)


def hash_concat(left: bytes, right: bytes) -> bytes:
    """
    Hash the concatenation of two byte sequences.

    This is used for computing Merkle parent hashes:
    parent = sha256(left + right)

    Args:
        left: Left child hash
        right: Right child hash

    Returns:
        32-byte SHA-256 digest of concatenation
    """
    return sha256(left + right)


def next_power_of_2(n: int) -> int:
    """
    Smallest power of two greater than or equal to n.

    next_power_of_2(1) == 1, next_power_of_2(5) == 8.

    Raises:
        ValueError: If n is less than 1
    """
    if n < 1:
        raise ValueError(f"next_power_of_2 expects a positive integer, got {n}")
    return 1 << (n - 1).bit_length()


def to_hex(data: bytes) -> str:
    """
    Convert bytes to a lowercase hexadecimal string (no prefix).

    Example:
        >>> to_hex(bytes.fromhex("DEADBEEF"))
        'deadbeef'
    """
    return data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert a hexadecimal string to bytes.

    An optional 0x prefix is accepted and upper case digits are tolerated.

    Args:
        hex_string: Hex string, with or without 0x prefix

    Returns:
        Decoded bytes

    Raises:
        ValueError: If the string has odd length or contains invalid
                    hex characters
    """
    hex_content = hex_string.strip()
    if hex_content[:2].lower() == "0x":
        hex_content = hex_content[2:]

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length, got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


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
