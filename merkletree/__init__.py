"""
merkletree - Merkle hash trees with compact inclusion proofs.

Usage:
    from merkletree import MerkleTree

    tree = MerkleTree.construct([b"a", b"b", b"c"])
    proof = tree.prove(b"c")
    MerkleTree.verify_proof(b"c", proof, tree.root())
"""

__version__ = "0.1.0"

from merkletree.merkle import (
    HashDirection,
    ProofStep,
    Proof,
    MerkleTree,
    construct,
    root,
    verify,
    prove,
    verify_proof,
)
from merkletree.schemas.errors import (
    MerkleTreeException,
    EmptyTreeException,
)

__all__ = [
    "__version__",
    "HashDirection",
    "ProofStep",
    "Proof",
    "MerkleTree",
    "construct",
    "root",
    "verify",
    "prove",
    "verify_proof",
    "MerkleTreeException",
    "EmptyTreeException",
]
