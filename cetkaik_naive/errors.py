"""
Cetkaik Error Hierarchy

Unified exception hierarchy for the board/field representation.
All custom exceptions inherit from CetkaikError for easy catching and filtering.

Usage:
    from cetkaik_naive.errors import InvalidMoveError, CannotCaptureOwnError

    try:
        new_field = field.move_nontam_piece(src, dest, whose_turn)
    except InvalidMoveError as e:
        logger.warning(f"Invalid move: {e.message}, code: {e.code}")
"""

from typing import Any, Dict, Optional

__all__ = [
    # Base error
    "CetkaikError",
    # Move application errors
    "InvalidMoveError",
    "EmptySourceError",
    "SourceIsNeutralError",
    "NotOwnerError",
    "SourceIsOpponentOwnedError",
    "CannotCaptureNeutralError",
    "CannotCaptureOwnError",
    # State errors
    "InvalidStateError",
    # Validation errors
    "ValidationError",
    "MalformedCoordinateError",
    "ConfigurationError",
]


class CetkaikError(Exception):
    """Base exception for all cetkaik errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """
    code: str = "CETKAIK_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Move Application Errors
# =============================================================================


class InvalidMoveError(CetkaikError):
    """Move that cannot be applied to the given field.

    Raised by the move-application protocol. The input field is never
    touched, so catching this leaves the caller with the state it had.
    """
    code: str = "INVALID_MOVE"


class EmptySourceError(InvalidMoveError):
    """The source square holds no piece."""
    code: str = "EMPTY_SOURCE"


class SourceIsNeutralError(InvalidMoveError):
    """The source square holds Tam2, which moves by its own two-step rule."""
    code: str = "SOURCE_IS_NEUTRAL"


class NotOwnerError(InvalidMoveError):
    """The piece at the source belongs to the opponent of the acting side."""
    code: str = "NOT_OWNER"


SourceIsOpponentOwnedError = NotOwnerError


class CannotCaptureNeutralError(InvalidMoveError):
    """The destination holds Tam2, which can never be captured."""
    code: str = "CANNOT_CAPTURE_NEUTRAL"


class CannotCaptureOwnError(InvalidMoveError):
    """The destination holds a piece of the acting side."""
    code: str = "CANNOT_CAPTURE_OWN"


# =============================================================================
# State Errors
# =============================================================================


class InvalidStateError(CetkaikError):
    """Corrupted or unexpected board state.

    Raised by the diagnostic `assert_empty` / `assert_occupied` checks and
    by the strict invariant check. Trusted internal callers only; this is
    not meant for validating untrusted move input.
    """
    code: str = "INVALID_STATE"


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(CetkaikError):
    """Base class for input validation failures."""
    code: str = "VALIDATION_ERROR"


class MalformedCoordinateError(ValidationError, ValueError):
    """A coordinate token could not be parsed."""
    code: str = "MALFORMED_COORDINATE"

    def __init__(self, token: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(f"Malformed coordinate token: {token!r}", context=context)
        self.token = token


class ConfigurationError(ValidationError):
    """Invalid configuration value (e.g. an unparseable environment flag)."""
    code: str = "CONFIGURATION_ERROR"
