"""
Request and response models for the Token Service API.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel


class GenerateTokenRequest(BaseModel):
    """Request model for token generation."""
    payload: Optional[Dict[str, Any]] = None


class TokenRequest(BaseModel):
    """Request model for token verification and decoding."""
    token: Optional[str] = None


class GenerateTokenResponse(BaseModel):
    success: bool = True
    token: str
    expires_at: Optional[str] = None


class VerifyTokenResponse(BaseModel):
    success: bool = True
    message: str = "Token is valid"
    decoded: Dict[str, Any]
    expires_at: Optional[str] = None


class DecodeTokenResponse(BaseModel):
    success: bool = True
    header: Dict[str, Any]
    payload: Dict[str, Any]
    expires_at: Optional[str] = None
