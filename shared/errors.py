"""
Shared error handling for the CRPT document submitter.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)


class SubmitterException(Exception):
    """Base exception for document submission."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            details=self.details
        )


class ConstructionError(SubmitterException):
    """Invalid construction parameters (e.g. non-positive request limit)."""

    def __init__(self, message: str = "Invalid construction parameters", details: Optional[Dict[str, Any]] = None):
        super().__init__("CONSTRUCTION_ERROR", message, details)


class SerializationError(SubmitterException):
    """Document could not be converted to or from the wire format."""

    def __init__(self, message: str = "Document serialization failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("SERIALIZATION_ERROR", message, details)


class GateClosedError(SubmitterException):
    """Permit requested from a gate that has been shut down."""

    def __init__(self, message: str = "Permit gate is closed", details: Optional[Dict[str, Any]] = None):
        super().__init__("GATE_CLOSED", message, details)
