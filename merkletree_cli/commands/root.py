"""
CLI Root Command

Compute the Merkle root of a set of files.

Usage:
    merkletree root a.bin b.bin c.bin [--chunk-size N] [--json]
"""

from __future__ import annotations

import json
import logging
from argparse import Namespace

from merkletree.crypto.hashing import HASH_ALGORITHM, to_hex
from merkletree.merkle import MerkleTree
from merkletree_cli.blocks import load_blocks
from merkletree_cli.commands import EXIT_SUCCESS, resolve_chunk_size, wants_json


logger = logging.getLogger(__name__)


def root_cmd(args: Namespace) -> int:
    """Print the root hash of the tree built from args.files."""
    blocks = load_blocks(args.files, resolve_chunk_size(args))
    tree = MerkleTree.construct(blocks)
    root_hex = to_hex(tree.root())

    logger.info(f"Computed root over {tree.leaf_count} block(s)")

    if wants_json(args):
        print(json.dumps({
            "root": root_hex,
            "leaf_count": tree.leaf_count,
            "depth": tree.depth,
            "hash_alg": HASH_ALGORITHM,
        }, indent=2))
    else:
        print(root_hex)

    return EXIT_SUCCESS
