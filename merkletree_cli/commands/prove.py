"""
CLI Prove Command

Generate an inclusion proof document for one block.

Usage:
    merkletree prove a.bin b.bin c.bin --data b.bin [--out proof.json]
    merkletree prove a.bin b.bin c.bin --index 1 [--out proof.json]
"""

from __future__ import annotations

import logging
import sys
from argparse import Namespace
from pathlib import Path

from merkletree.merkle import MerkleTree
from merkletree.schemas.proof import ProofDocument
from merkletree_cli.blocks import load_blocks
from merkletree_cli.commands import (
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
    resolve_chunk_size,
)


logger = logging.getLogger(__name__)


def prove_cmd(args: Namespace) -> int:
    """Write a proof document for --data or --index."""
    blocks = load_blocks(args.files, resolve_chunk_size(args))
    tree = MerkleTree.construct(blocks)

    if args.index is not None:
        leaf_index = args.index
    else:
        leaf_index = tree.index_of(Path(args.data).read_bytes())
        if leaf_index is None:
            print(f"Error: {args.data} is not a block of this tree", file=sys.stderr)
            return EXIT_VERIFICATION_FAILED

    proof = tree.prove_index(leaf_index)
    if proof is None:
        print(
            "Error: tree has a single block; its root is the leaf hash and needs no proof",
            file=sys.stderr,
        )
        return EXIT_VERIFICATION_FAILED

    document = ProofDocument.from_proof(proof, root=tree.root(), leaf_index=leaf_index)
    text = document.to_json()

    if args.out:
        Path(args.out).write_text(text + "\n")
        logger.info(f"Wrote proof for leaf {leaf_index} ({len(proof)} steps) to {args.out}")
    else:
        print(text)

    return EXIT_SUCCESS
