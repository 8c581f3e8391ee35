"""
Error handling for densemat.

Every precondition failure surfaces as ``InvalidArgument``; the numeric
``code`` tells callers which precondition was violated.
"""

from __future__ import annotations

from typing import Optional


# =============================================================================
# Error Codes
# =============================================================================

# Success
OK = 0

# General errors (1-9)
ERROR_NULL_POINTER = 4

# Argument errors (10-19)
ERROR_INVALID_ARGUMENT = 10
ERROR_DIMENSION_MISMATCH = 11
ERROR_INDEX_OUT_OF_BOUNDS = 14

# Type errors (20-29)
ERROR_TYPE_ERROR = 20


_ERROR_MESSAGES = {
    OK: "Success",
    ERROR_NULL_POINTER: "Null argument",
    ERROR_INVALID_ARGUMENT: "Invalid argument",
    ERROR_DIMENSION_MISMATCH: "Dimension mismatch",
    ERROR_INDEX_OUT_OF_BOUNDS: "Index out of bounds",
    ERROR_TYPE_ERROR: "Type error",
}


def error_message(code: int) -> str:
    """Get the generic message for an error code."""
    return _ERROR_MESSAGES.get(code, f"Unknown error (code={code})")


# =============================================================================
# Exception Classes
# =============================================================================

class MatrixError(Exception):
    """
    Base exception for all densemat errors.

    Error codes are re-exported as class attributes so callers can write
    ``err.code == InvalidArgument.ERROR_DIMENSION_MISMATCH``.
    """

    OK = OK
    ERROR_NULL_POINTER = ERROR_NULL_POINTER
    ERROR_INVALID_ARGUMENT = ERROR_INVALID_ARGUMENT
    ERROR_DIMENSION_MISMATCH = ERROR_DIMENSION_MISMATCH
    ERROR_INDEX_OUT_OF_BOUNDS = ERROR_INDEX_OUT_OF_BOUNDS
    ERROR_TYPE_ERROR = ERROR_TYPE_ERROR

    def __init__(self, code: int, message: Optional[str] = None):
        """
        Create densemat exception.

        Args:
            code: Error code
            message: Optional detailed message (looked up from code if not provided)
        """
        self.code = code
        if message is None:
            message = error_message(code)
        self.message = message
        super().__init__(f"Matrix Error {code}: {message}")

    @classmethod
    def from_code(cls, code: int, context: str = "") -> "MatrixError":
        """Create exception from error code with optional context."""
        base_msg = error_message(code)
        msg = f"{context}: {base_msg}" if context else base_msg
        return cls(code, msg)


class InvalidArgument(MatrixError, ValueError):
    """Raised when an argument violates a precondition."""


# =============================================================================
# Error Checking Functions
# =============================================================================

def check_argument(condition: bool, code: int, context: str = "") -> None:
    """
    Raise ``InvalidArgument`` unless ``condition`` holds.

    Args:
        condition: Precondition that must be true
        code: Error code describing the violated precondition
        context: Optional context message for better error reporting

    Raises:
        InvalidArgument: If condition is false
    """
    if condition:
        return
    raise InvalidArgument.from_code(code, context)
