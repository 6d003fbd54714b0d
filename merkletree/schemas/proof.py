"""
Proof document schemas.

Purpose: Portable, JSON-serializable form of an inclusion proof. Hashes are
carried as lowercase hex so documents can be checked with external tooling.
"""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from merkletree.crypto.hashing import HASH_ALGORITHM, from_hex, to_hex
from merkletree.merkle.merkle_tree import HashDirection, Proof, ProofStep

from .errors import ErrorCodes, ProofFormatException


# Current proof document version
SCHEMA_VERSION: str = "v1"

# 32-byte digest as lowercase hex
HASH_HEX_PATTERN = r"^[0-9a-f]{64}$"


def _normalize_hex(value: Any) -> Any:
    if isinstance(value, bytes):
        return to_hex(value)
    if isinstance(value, str):
        value = value.strip().lower()
        if value.startswith("0x"):
            value = value[2:]
    return value


class ProofStepModel(BaseModel):
    """One serialized proof step."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    direction: HashDirection = Field(
        ...,
        description="Side of the running hash at this level ('left' or 'right')",
    )
    sibling: str = Field(
        ...,
        description="Sibling hash as lowercase hex",
        pattern=HASH_HEX_PATTERN,
    )

    @field_validator("sibling", mode="before")
    @classmethod
    def normalize_sibling(cls, v: Any) -> Any:
        return _normalize_hex(v)


class ProofDocument(BaseModel):
    """
    Serialized inclusion proof.

    `root` and `leaf_index` are informational: a verifier should compare
    against a root it already trusts rather than the one in the document.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: Literal["v1"] = Field(default=SCHEMA_VERSION)
    hash_alg: Literal["sha256"] = Field(default=HASH_ALGORITHM)
    root: str | None = Field(
        default=None,
        description="Root hash the proof was generated against (lowercase hex)",
        pattern=HASH_HEX_PATTERN,
    )
    leaf_index: int | None = Field(
        default=None,
        description="Position of the proven block in the tree",
        ge=0,
    )
    steps: list[ProofStepModel] = Field(
        ...,
        description="Proof steps ordered from the leaf level upwards",
        min_length=1,
    )

    @field_validator("root", mode="before")
    @classmethod
    def normalize_root(cls, v: Any) -> Any:
        return _normalize_hex(v)

    @classmethod
    def from_proof(
        cls,
        proof: Proof,
        root: bytes | None = None,
        leaf_index: int | None = None,
    ) -> "ProofDocument":
        """Build a document from an in-memory Proof."""
        return cls(
            root=to_hex(root) if root is not None else None,
            leaf_index=leaf_index,
            steps=[
                ProofStepModel(direction=step.direction, sibling=to_hex(step.sibling))
                for step in proof.steps
            ],
        )

    def to_proof(self) -> Proof:
        """Convert back to an in-memory Proof."""
        return Proof(
            steps=tuple(
                ProofStep(direction=step.direction, sibling=from_hex(step.sibling))
                for step in self.steps
            )
        )

    @property
    def root_bytes(self) -> bytes | None:
        """Root hash as raw bytes, if the document carries one."""
        return from_hex(self.root) if self.root is not None else None

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to JSON with stable key order."""
        return json.dumps(
            self.model_dump(mode="json", exclude_none=True),
            indent=indent,
            sort_keys=True,
        )

    @classmethod
    def from_json(cls, text: str, source: str | None = None) -> "ProofDocument":
        """
        Parse a JSON proof document.

        Raises:
            ProofFormatException: If the text is not valid JSON or does not
                match the schema; code is UNSUPPORTED_HASH_ALGORITHM when
                hash_alg is anything but sha256
        """
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            code = ErrorCodes.PROOF_FORMAT_INVALID
            if any(err["loc"][:1] == ("hash_alg",) for err in e.errors()):
                code = ErrorCodes.UNSUPPORTED_HASH_ALGORITHM
            raise ProofFormatException(
                message=f"Invalid proof document: {e.error_count()} validation error(s)",
                source=source,
                details={"errors": [err["msg"] for err in e.errors()]},
                code=code,
            ) from e


__all__ = [
    "SCHEMA_VERSION",
    "ProofStepModel",
    "ProofDocument",
]
