"""
Merkle Library API
Thin function wrappers around MerkleTree for a flat, call-style API.

This module provides:
- construct: Build a tree from data blocks
- root: Root hash of a tree
- verify: Rebuild from blocks and compare roots
- prove: Inclusion proof for a data block
- verify_proof: Check a proof against a trusted root

These are convenience wrappers around the methods in merkle_tree.py.
"""
from __future__ import annotations

from typing import Optional, Sequence

from merkletree.merkle.merkle_tree import MerkleTree, Proof


def construct(blocks: Sequence[bytes]) -> MerkleTree:
    """
    Build a Merkle tree from an ordered sequence of data blocks.

    Raises:
        EmptyTreeException: If blocks is empty
    """
    return MerkleTree.construct(blocks)


def root(tree: MerkleTree) -> bytes:
    """Return the 32-byte root hash of tree."""
    return tree.root()


def verify(blocks: Sequence[bytes], expected_root: bytes) -> bool:
    """Return True if blocks build a tree whose root equals expected_root."""
    return MerkleTree.verify(blocks, expected_root)


def prove(tree: MerkleTree, data: bytes) -> Optional[Proof]:
    """
    Generate an inclusion proof for data in tree.

    Returns:
        Proof, or None when data is not a leaf or the tree has one leaf
    """
    return tree.prove(data)


def verify_proof(data: bytes, proof: Proof, expected_root: bytes) -> bool:
    """Return True if data folded through proof reproduces expected_root."""
    return MerkleTree.verify_proof(data, proof, expected_root)


__all__ = [
    "construct",
    "root",
    "verify",
    "prove",
    "verify_proof",
]
