"""
Token error taxonomy.

Every failure of the engine is raised as one of these types. None of them
are retriable: they describe bad input or bad configuration. Translating a
kind into an HTTP status is the caller's job.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from shared.errors import TokenServiceException


class TokenError(TokenServiceException):
    """Base class for all token engine errors."""

    code = "TOKEN_ERROR"
    default_message = "Token error"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(self.code, message or self.default_message, details)


class MalformedToken(TokenError):
    """The token is not three well-formed base64url JSON segments."""

    code = "MALFORMED_TOKEN"
    default_message = "Malformed token"


class MalformedSegment(MalformedToken):
    """A single segment is not valid base64url or not a JSON object."""

    code = "MALFORMED_SEGMENT"
    default_message = "Malformed token segment"


class InvalidClaims(MalformedToken):
    """Header or claims cannot be serialized, or a time claim is not numeric."""

    code = "INVALID_CLAIMS"
    default_message = "Invalid claims"


class UnsupportedAlgorithm(TokenError):
    code = "UNSUPPORTED_ALGORITHM"
    default_message = "Unsupported algorithm"


class AlgorithmMismatch(TokenError):
    code = "ALGORITHM_MISMATCH"
    default_message = "Token algorithm does not match the expected algorithm"


class InvalidSignature(TokenError):
    code = "INVALID_SIGNATURE"
    default_message = "Invalid signature"


class InvalidKey(TokenError):
    code = "INVALID_KEY"
    default_message = "Signing secret must be a non-empty value"


class TokenExpired(TokenError):
    """The `exp` claim is in the past."""

    code = "TOKEN_EXPIRED"
    default_message = "Token has expired"

    def __init__(self, expired_at: Optional[datetime], message: Optional[str] = None):
        self.expired_at = expired_at
        stamp = expired_at.isoformat() if expired_at is not None else None
        super().__init__(
            message or (f"jwt expired at {stamp}" if stamp else "jwt expired"),
            details={"expired_at": stamp}
        )


class TokenNotYetValid(TokenError):
    """The `nbf` claim is in the future."""

    code = "TOKEN_NOT_YET_VALID"
    default_message = "Token is not yet valid"

    def __init__(self, not_before: Optional[datetime], message: Optional[str] = None):
        self.not_before = not_before
        stamp = not_before.isoformat() if not_before is not None else None
        super().__init__(
            message or (f"jwt not active until {stamp}" if stamp else "jwt not active"),
            details={"not_before": stamp}
        )
