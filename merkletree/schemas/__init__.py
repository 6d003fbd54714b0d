"""
Schemas and error taxonomy.

Proof document models live in merkletree.schemas.proof; they depend on the
Merkle engine and are imported from there directly.
"""

from .errors import (
    ErrorCodes,
    MerkleTreeError,
    MerkleTreeException,
    EmptyTreeException,
    ProofFormatException,
)

__all__ = [
    "ErrorCodes",
    "MerkleTreeError",
    "MerkleTreeException",
    "EmptyTreeException",
    "ProofFormatException",
]
