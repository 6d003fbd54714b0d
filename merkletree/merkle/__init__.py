"""
Merkle Tree and Inclusion Proofs
Flat-array Merkle tree construction + proof generation/verification.

This module provides:
- MerkleTree: Immutable tree with root/prove/verify queries
- Proof, ProofStep, HashDirection: Inclusion proof types
- construct, root, verify, prove, verify_proof: Function-style API

Commitment Rules:
1. Leaf hashing: sha256(block)
2. Parent hashing: sha256(left + right)
3. Promotion: lone node of an odd level is carried up unchanged
4. Empty input: EmptyTreeException
5. Single leaf: root = leaf hash, no proof

Usage:
    from merkletree.merkle import construct, prove, verify_proof

    blocks = [b"alpha", b"beta", b"gamma"]
    tree = construct(blocks)

    proof = prove(tree, b"beta")
    assert verify_proof(b"beta", proof, tree.root())
"""
from .merkle_tree import (
    HashDirection,
    ProofStep,
    Proof,
    MerkleTree,
)

from .merkle_proofs import (
    construct,
    root,
    verify,
    prove,
    verify_proof,
)


__all__ = [
    # Core types
    "HashDirection",
    "ProofStep",
    "Proof",
    "MerkleTree",
    # Function API
    "construct",
    "root",
    "verify",
    "prove",
    "verify_proof",
]
