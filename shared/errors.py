"""
Shared error handling for the Token Service.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel

from shared.logging import request_id_var


class ErrorResponse(BaseModel):
    """Standard error response format."""

    success: bool = False
    request_id: Optional[str] = None
    code: str
    error: str
    message: str
    details: Dict[str, Any] = {}


class TokenServiceException(Exception):
    """Base exception for Token Service errors."""

    status_code: int = 400
    title: str = "Request failed"

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self, error: Optional[str] = None) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            request_id=request_id_var.get(),
            code=self.code,
            error=error or self.title,
            message=self.message,
            details=self.details
        )


class ValidationError(TokenServiceException):
    """Request validation errors."""

    title = "Bad request"

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("VALIDATION_ERROR", message, details)


class AuthenticationError(TokenServiceException):
    """Authentication-related errors."""

    status_code = 401
    title = "Invalid token"

    def __init__(self, message: str = "Authentication failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("AUTHENTICATION_ERROR", message, details)


class ServiceError(TokenServiceException):
    """Service-related errors."""

    status_code = 500
    title = "Internal server error"

    def __init__(self, message: str = "Service error", details: Optional[Dict[str, Any]] = None):
        super().__init__("SERVICE_ERROR", message, details)
