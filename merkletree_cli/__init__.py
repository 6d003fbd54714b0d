"""
merkletree CLI

Command-line interface for building Merkle trees over files and working
with inclusion proofs.

Usage:
    python -m merkletree_cli root a.bin b.bin c.bin
    python -m merkletree_cli prove a.bin b.bin c.bin --index 1 --out proof.json
    python -m merkletree_cli verify-proof b.bin proof.json --root <hex>
"""

__version__ = "0.1.0"
