"""
Merkle Tree Engine
Flat-array Merkle tree construction, proof generation, and verification.

This module provides:
- MerkleTree: immutable tree stored as a breadth-first node array
- HashDirection / ProofStep / Proof: inclusion proof types
- Proof generation by data or by leaf index
- Root and proof verification

Commitment Rules (Hard Contracts):
1. Leaf hashing: leaf = sha256(block)
2. Parent hashing: parent = sha256(left + right)
3. Promotion: a lone node at the end of an odd-sized level is carried up
   to the next level unchanged
4. Empty input: rejected with EmptyTreeException
5. Single leaf: root = leaf hash

Layout:
    The tree is a complete binary tree in heap order. Index 0 is the root,
    the parent of i is (i - 1) // 2 and the sibling of i is i - 1 when i is
    even, i + 1 when i is odd. With n leaves and P = next_power_of_2(n) the
    array holds P - 1 internal slots followed by the n leaves. Level d
    (leaves are level 0) starts at index (P >> d) - 1. Slots a level does not
    fill stay vacant (None).

Example (n = 3, P = 4):
    index:  0     1        2    3   4   5
    node:   root  H(a+b)   c    a   b   c
    (index 2 is c promoted; its would-be sibling slot lies past the array)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Sequence

from merkletree.crypto.hashing import hash_concat, hash_data, next_power_of_2
from merkletree.schemas.errors import EmptyTreeException


logger = logging.getLogger(__name__)


class HashDirection(str, Enum):
    """
    Side the running hash occupies at one proof step.

    LEFT:  current node is a left child  -> parent = H(current + sibling)
    RIGHT: current node is a right child -> parent = H(sibling + current)
    """
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class ProofStep:
    """
    One level of an inclusion proof.

    Attributes:
        direction: Side of the running hash at this level
        sibling: Sibling hash to combine with
    """
    direction: HashDirection
    sibling: bytes

    def apply(self, current: bytes) -> bytes:
        """Combine the running hash with this step's sibling."""
        if self.direction is HashDirection.LEFT:
            return hash_concat(current, self.sibling)
        return hash_concat(self.sibling, current)


@dataclass(frozen=True)
class Proof:
    """
    Inclusion proof: sibling hashes ordered from the leaf level upwards.

    The root itself is not part of the proof. Levels where the proven path
    was promoted without a sibling contribute no step.
    """
    steps: tuple[ProofStep, ...]

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[ProofStep]:
        return iter(self.steps)

    def compute_root(self, data: bytes) -> bytes:
        """Fold the proof over hash_data(data) and return the resulting root."""
        current = hash_data(data)
        for step in self.steps:
            current = step.apply(current)
        return current


class MerkleTree:
    """
    Merkle tree over an ordered list of data blocks.

    Build with MerkleTree.construct(); the instance is read-only afterwards
    and safe to share between threads.

    Example:
        >>> tree = MerkleTree.construct([b"a", b"b", b"c"])
        >>> proof = tree.prove(b"b")
        >>> MerkleTree.verify_proof(b"b", proof, tree.root())
        True
    """

    __slots__ = ("_nodes", "_leaf_count", "_leaf_offset")

    def __init__(self, nodes: Sequence[Optional[bytes]], leaf_count: int) -> None:
        """
        Wrap an already built node array.

        Prefer MerkleTree.construct(); this initializer does not recompute
        or check any hashes.
        """
        if leaf_count < 1:
            raise EmptyTreeException()
        leaf_offset = next_power_of_2(leaf_count) - 1
        if len(nodes) != leaf_offset + leaf_count:
            raise ValueError(
                f"Node array of length {len(nodes)} does not fit {leaf_count} leaves"
            )
        self._nodes: tuple[Optional[bytes], ...] = tuple(nodes)
        self._leaf_count = leaf_count
        self._leaf_offset = leaf_offset

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def construct(cls, blocks: Sequence[bytes]) -> "MerkleTree":
        """
        Build a tree from data blocks.

        Block order determines leaf positions, so reordering blocks changes
        the root.

        Args:
            blocks: Ordered sequence of data blocks

        Returns:
            Fully built MerkleTree

        Raises:
            EmptyTreeException: If blocks is empty
        """
        leaves = [hash_data(block) for block in blocks]
        if not leaves:
            raise EmptyTreeException()
        return cls._build_tree_from_leaves(leaves)

    @classmethod
    def _build_tree_from_leaves(cls, leaves: list[bytes]) -> "MerkleTree":
        leaf_count = len(leaves)
        width = next_power_of_2(leaf_count)
        nodes: list[Optional[bytes]] = [None] * (width - 1 + leaf_count)

        # Leaves fill the tail
        nodes[width - 1:] = leaves

        level = leaves
        while len(level) > 1:
            level = cls._construct_upper_level(level)
            width //= 2
            nodes[width - 1:width - 1 + len(level)] = level

        logger.debug(
            "Built Merkle tree: %d leaves, %d slots, root=%s",
            leaf_count, len(nodes), nodes[0].hex(),
        )
        return cls(nodes, leaf_count)

    @staticmethod
    def _construct_upper_level(level: list[bytes]) -> list[bytes]:
        """Pair adjacent nodes left to right; a trailing lone node is promoted."""
        upper: list[bytes] = []
        for i in range(0, len(level) - 1, 2):
            upper.append(hash_concat(level[i], level[i + 1]))
        if len(level) % 2 == 1:
            upper.append(level[-1])
        return upper

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def root(self) -> bytes:
        """Root hash of this tree."""
        return self._nodes[0]

    @property
    def leaf_count(self) -> int:
        """Number of data blocks committed to this tree."""
        return self._leaf_count

    @property
    def nodes(self) -> tuple[Optional[bytes], ...]:
        """Full node array in heap order; vacant slots are None."""
        return self._nodes

    @property
    def leaves(self) -> tuple[bytes, ...]:
        """Leaf hashes in block order."""
        return self._nodes[self._leaf_offset:]

    @property
    def depth(self) -> int:
        """Number of levels from leaves to root inclusive (1 for a single leaf)."""
        return (self._leaf_offset + 1).bit_length()

    def index_of(self, data: bytes) -> Optional[int]:
        """
        Leaf position of the first block equal to data, or None.

        Only the leaf region is searched; internal and promoted nodes never
        match.
        """
        leaf_hash = hash_data(data)
        for position, leaf in enumerate(self.leaves):
            if leaf == leaf_hash:
                return position
        return None

    # ------------------------------------------------------------------
    # Proofs
    # ------------------------------------------------------------------

    def prove(self, data: bytes) -> Optional[Proof]:
        """
        Generate an inclusion proof for a data block.

        If the block occurs more than once, the proof is for its first
        occurrence.

        Args:
            data: Data block believed to be in the tree

        Returns:
            Proof, or None if the block is not a leaf of this tree or the
            tree has a single leaf (the root needs no proof steps)
        """
        position = self.index_of(data)
        if position is None:
            logger.debug("No leaf matches the requested data")
            return None
        return self.prove_index(position)

    def prove_index(self, leaf_index: int) -> Optional[Proof]:
        """
        Generate an inclusion proof for the leaf at leaf_index.

        Args:
            leaf_index: 0-based position of the block

        Returns:
            Proof, or None for a single-leaf tree

        Raises:
            IndexError: If leaf_index is out of range
        """
        if leaf_index < 0 or leaf_index >= self._leaf_count:
            raise IndexError(
                f"Leaf index {leaf_index} out of range for {self._leaf_count} leaves"
            )

        steps: list[ProofStep] = []
        index = self._leaf_offset + leaf_index

        while index > 0:
            if index % 2 == 0:
                sibling_index, direction = index - 1, HashDirection.RIGHT
            else:
                sibling_index, direction = index + 1, HashDirection.LEFT

            sibling = self._nodes[sibling_index] if sibling_index < len(self._nodes) else None
            # No sibling means this node was promoted unchanged
            if sibling is not None:
                steps.append(ProofStep(direction=direction, sibling=sibling))

            index = (index - 1) // 2

        if not steps:
            return None
        return Proof(steps=tuple(steps))

    # ------------------------------------------------------------------
    # Verification
    # ------------------------------------------------------------------

    @classmethod
    def verify(cls, blocks: Sequence[bytes], expected_root: bytes) -> bool:
        """
        Check that blocks produce expected_root.

        Rebuilds the whole tree; an empty block list never verifies.
        """
        if len(blocks) == 0:
            logger.debug("Refusing to verify an empty block list")
            return False
        return cls.construct(blocks).root() == expected_root

    @staticmethod
    def verify_proof(data: bytes, proof: Proof, expected_root: bytes) -> bool:
        """
        Check that data and proof recompute expected_root.

        Needs no access to the original data set.

        Args:
            data: Data block being proven
            proof: Inclusion proof for that block
            expected_root: Trusted root hash

        Returns:
            True only on exact byte equality of the recomputed root
        """
        return proof.compute_root(data) == expected_root

    def __len__(self) -> int:
        return self._leaf_count

    def __repr__(self) -> str:
        return f"MerkleTree(leaves={self._leaf_count}, root={self.root().hex()})"


__all__ = [
    "HashDirection",
    "ProofStep",
    "Proof",
    "MerkleTree",
]
