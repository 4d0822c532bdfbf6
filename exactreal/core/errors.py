"""
Library exceptions.

Every failure in the Real arithmetic layer is reported as an InvalidRealError
and propagates to the caller unchanged.
"""

from typing import Any, Dict, Optional


class RealError(Exception):
    """Base exception for exactreal errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidRealError(RealError):
    """
    Raised when an operation cannot produce a valid Real.

    This covers reading from an Unset value, even roots of negative radicands,
    roots with a base below 1 and division by zero.
    """

    def __init__(self, message: str, **details: Any):
        super().__init__(message=message, details=details)

    @classmethod
    def for_operand(cls, operand: Any, operation: Optional[str] = None) -> "InvalidRealError":
        """Build the error raised when ``operand`` is not a usable Real."""
        details: Dict[str, Any] = {"operand": repr(operand)}
        if operation:
            details["operation"] = operation
        return cls(f"Invalid real: {operand!r}", **details)
