"""
Error taxonomy for the Merkle tree library.

Defines both a Pydantic model for structured error reporting (used by the
CLI's JSON output) and Python exceptions for control flow.

Lookup misses are not errors: MerkleTree.prove returns None and the
verify functions return False. Exceptions are reserved for inputs that
cannot form a tree or a proof at all.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Construction
    EMPTY_TREE = "EMPTY_TREE"

    # Proof documents
    PROOF_FORMAT_INVALID = "PROOF_FORMAT_INVALID"
    UNSUPPORTED_HASH_ALGORITHM = "UNSUPPORTED_HASH_ALGORITHM"

    # Verification outcomes (reported, never raised by the library)
    MERKLE_PROOF_INVALID = "MERKLE_PROOF_INVALID"
    ROOT_MISMATCH = "ROOT_MISMATCH"
    LEAF_NOT_FOUND = "LEAF_NOT_FOUND"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class MerkleTreeError(BaseModel):
    """
    Error model for structured error reporting.

    Used where a failure has to be serialized rather than raised, e.g. the
    CLI's --json output.
    """

    model_config = ConfigDict(extra="forbid")

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.EMPTY_TREE],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )

    def to_exception(self) -> "MerkleTreeException":
        """Convert this error model to a raisable exception."""
        return MerkleTreeException(
            code=self.code,
            message=self.message,
            details=self.details,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class MerkleTreeException(Exception):
    """
    Base exception for all Merkle tree library errors.

    Carries structured error information and can be converted to a
    MerkleTreeError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "MERKLE_TREE_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> MerkleTreeError:
        """Convert this exception to a MerkleTreeError model."""
        return MerkleTreeError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class EmptyTreeException(MerkleTreeException, ValueError):
    """Raised when a tree is constructed from zero data blocks."""

    def __init__(
        self,
        message: str = "Cannot construct a Merkle tree from empty input",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.EMPTY_TREE,
            details=details,
        )


class ProofFormatException(MerkleTreeException):
    """Raised when a serialized proof document cannot be loaded."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        details: dict[str, Any] | None = None,
        code: str = ErrorCodes.PROOF_FORMAT_INVALID,
    ) -> None:
        full_details = details or {}
        if source:
            full_details["source"] = source
        super().__init__(
            message=message,
            code=code,
            details=full_details,
        )
