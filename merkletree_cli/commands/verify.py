"""
CLI Verify Commands

Check data against a trusted root:
- verify: rebuild the tree from all blocks and compare roots
- verify-proof: check one block with a proof document, no other data needed

Usage:
    merkletree verify a.bin b.bin c.bin --root <hex>
    merkletree verify-proof b.bin proof.json [--root <hex>]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path

from merkletree.crypto.hashing import from_hex, to_hex
from merkletree.merkle import MerkleTree
from merkletree.schemas.errors import ErrorCodes, MerkleTreeError
from merkletree.schemas.proof import ProofDocument
from merkletree_cli.blocks import load_blocks
from merkletree_cli.commands import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
    resolve_chunk_size,
    wants_json,
)


logger = logging.getLogger(__name__)


def _report(args: Namespace, ok: bool, root: bytes, error: MerkleTreeError | None) -> int:
    if wants_json(args):
        payload = {"ok": ok, "root": to_hex(root)}
        if error is not None:
            payload["error"] = error.model_dump()
        print(json.dumps(payload, indent=2))
    elif ok:
        print(f"OK: root {to_hex(root)}")
    else:
        print(f"FAILED: {error.message if error else 'verification failed'}")
    return EXIT_SUCCESS if ok else EXIT_VERIFICATION_FAILED


def verify_cmd(args: Namespace) -> int:
    """Rebuild the tree from args.files and compare with --root."""
    expected_root = from_hex(args.root)
    blocks = load_blocks(args.files, resolve_chunk_size(args))

    logger.info(f"Verifying {len(blocks)} block(s) against root {to_hex(expected_root)}")
    ok = MerkleTree.verify(blocks, expected_root)

    error = None
    if not ok:
        error = MerkleTreeError(
            code=ErrorCodes.ROOT_MISMATCH,
            message="Blocks do not produce the expected root",
            details={"block_count": len(blocks)},
        )
    return _report(args, ok, expected_root, error)


def verify_proof_cmd(args: Namespace) -> int:
    """Check one data file against a proof document."""
    proof_path = Path(args.proof)
    document = ProofDocument.from_json(proof_path.read_text(), source=str(proof_path))

    if args.root:
        expected_root = from_hex(args.root)
    elif document.root is not None:
        logger.warning("No --root given; trusting the root stored in the proof document")
        expected_root = document.root_bytes
    else:
        print("Error: proof document has no root; pass --root", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    data = Path(args.data).read_bytes()
    ok = MerkleTree.verify_proof(data, document.to_proof(), expected_root)

    error = None
    if not ok:
        error = MerkleTreeError(
            code=ErrorCodes.MERKLE_PROOF_INVALID,
            message="Proof does not reproduce the expected root",
            details={"steps": len(document.steps), "leaf_index": document.leaf_index},
        )
    return _report(args, ok, expected_root, error)
