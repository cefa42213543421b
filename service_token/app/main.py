"""
Token service: HTTP endpoints for generating, verifying and decoding tokens.
"""

import json
import time
from datetime import datetime, timezone
from typing import Optional

from fastapi import Header
from fastapi.responses import JSONResponse

from shared.base_service import BaseService
from shared.config import ServiceConfig
from shared.errors import AuthenticationError, TokenServiceException, ValidationError
from .jwt import (
    MalformedToken,
    TokenError,
    TokenExpired,
    TokenNotYetValid,
    TokenVerifier,
    decode,
    sign,
)
from .partner import build_partner_claims, build_partner_header
from .schemas import (
    DecodeTokenResponse,
    GenerateTokenRequest,
    GenerateTokenResponse,
    TokenRequest,
    VerifyTokenResponse,
)

SERVICE_NAME = "token"

INVALID_HEADER_MESSAGE = "Invalid or missing x-jwt-header. It must be a valid JSON string."
MISSING_INPUT_MESSAGE = "Both x-jwt-header and payload are required."
MISSING_TOKEN_MESSAGE = "Token is required"


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def verification_error_title(exc: TokenError) -> str:
    """Client-facing summary for a failed verification."""
    if isinstance(exc, TokenExpired):
        return "Token has expired"
    if isinstance(exc, TokenNotYetValid):
        return "Token is not yet valid"
    if isinstance(exc, MalformedToken):
        return "Invalid token format"
    return "Invalid token"


class TokenService(BaseService):
    """Token service implementation."""

    def __init__(self, config: Optional[ServiceConfig] = None):
        super().__init__(SERVICE_NAME, config=config)
        self._secret = self.config.secret_bytes()
        self.verifier = TokenVerifier(
            self._secret,
            algorithm=self.config.jwt_algorithm,
            leeway=self.config.jwt_leeway_seconds
        )
        self._setup_token_routes()

    def _reject(self, operation: str, exc: TokenServiceException, error: str,
                status_code: Optional[int] = None) -> JSONResponse:
        """Log a rejected request and shape the error body."""
        self.logger.warning(
            f"Token {operation} rejected",
            code=exc.code,
            reason=exc.message
        )
        self.metrics.record_token_operation(operation, exc.code)
        return JSONResponse(
            status_code=status_code or exc.status_code,
            content=exc.to_response(error=error).model_dump()
        )

    def _setup_token_routes(self):
        """Set up token routes."""

        @self.app.get("/")
        async def root():
            """API description."""
            return {
                "service": SERVICE_NAME,
                "message": "JWT Token Server API",
                "version": "1.0.0",
                "endpoints": {
                    "POST /api/generate-token": "Generate a new JWT token",
                    "POST /api/generate-partner-token": "Generate a partner JWT token with the fixed header and claims",
                    "POST /api/verify-token": "Verify an existing JWT token",
                    "POST /api/decode-token": "Decode a JWT token without verification",
                    "GET /api/health": "Health check endpoint"
                },
                "example_usage": {
                    "generate_token": {
                        "method": "POST",
                        "url": "/api/generate-token",
                        "headers": {"x-jwt-header": json.dumps({"alg": "HS256", "typ": "JWT"})},
                        "body": {"payload": {"sub": "1"}}
                    },
                    "verify_token": {
                        "method": "POST",
                        "url": "/api/verify-token",
                        "body": {"token": "your-jwt-token-here"}
                    }
                }
            }

        @self.app.get("/api/health")
        async def api_health():
            """Liveness endpoint."""
            self.metrics.record_health_check("ok")
            return {
                "success": True,
                "message": "JWT Token Server is running",
                "timestamp": _isoformat(datetime.now(timezone.utc)),
                "uptime": self._get_uptime()
            }

        @self.app.post("/api/generate-token")
        async def generate_token(
            request: Optional[GenerateTokenRequest] = None,
            x_jwt_header: Optional[str] = Header(default=None, alias="x-jwt-header"),
        ):
            """Sign a caller-supplied header and payload."""
            try:
                header = json.loads(x_jwt_header) if x_jwt_header else None
            except ValueError:
                header = None
            if not isinstance(header, dict):
                return self._reject("sign", ValidationError(INVALID_HEADER_MESSAGE), INVALID_HEADER_MESSAGE)

            payload = request.payload if request is not None else None
            if payload is None:
                return self._reject("sign", ValidationError(MISSING_INPUT_MESSAGE), MISSING_INPUT_MESSAGE)

            payload = dict(payload)
            if self.config.issue_iat:
                payload.setdefault("iat", int(time.time()))

            try:
                token = sign(header, payload, self._secret)
            except TokenError as exc:
                return self._reject("sign", exc, "Failed to generate JWT token")

            self.metrics.record_token_operation("sign", "ok")
            self.logger.info("Token issued", alg=header.get("alg", "HS256"), custom_header=True)
            return GenerateTokenResponse(token=token, expires_at=_isoformat(decode(token).expires_at))

        @self.app.post("/api/generate-partner-token")
        async def generate_partner_token():
            """Sign the fixed partner header and a one-off partner payload."""
            issued_at = int(time.time())
            claims = build_partner_claims(
                self.config.partner_api_key,
                self.config.partner_issuer,
                issued_at,
                ttl=self.config.partner_token_ttl
            )
            token = sign(build_partner_header(self.config), claims, self._secret)

            self.metrics.record_token_operation("sign", "ok")
            self.logger.info("Partner token issued", alg=self.config.jwt_algorithm, exp=claims["exp"])
            return GenerateTokenResponse(token=token, expires_at=_isoformat(decode(token).expires_at))

        @self.app.post("/api/verify-token")
        async def verify_token(request: Optional[TokenRequest] = None):
            """Verify signature, algorithm and time claims."""
            if request is None or not request.token:
                return self._reject("verify", ValidationError(MISSING_TOKEN_MESSAGE), MISSING_TOKEN_MESSAGE)

            try:
                verified = self.verifier.verify(request.token)
            except TokenError as exc:
                return self._reject("verify", exc, verification_error_title(exc),
                                    status_code=AuthenticationError.status_code)

            self.metrics.record_token_operation("verify", "ok")
            self.logger.info("Token verified", alg=verified.header.get("alg"))
            return VerifyTokenResponse(
                decoded=verified.payload,
                expires_at=_isoformat(verified.expires_at)
            )

        @self.app.post("/api/decode-token")
        async def decode_token(request: Optional[TokenRequest] = None):
            """Decode a token without checking it."""
            if request is None or not request.token:
                return self._reject("decode", ValidationError(MISSING_TOKEN_MESSAGE), MISSING_TOKEN_MESSAGE)

            try:
                decoded = decode(request.token)
            except MalformedToken as exc:
                return self._reject("decode", exc, "Invalid token format")

            self.metrics.record_token_operation("decode", "ok")
            return DecodeTokenResponse(
                header=decoded.header,
                payload=decoded.payload,
                expires_at=_isoformat(decoded.expires_at)
            )


def create_app(config: Optional[ServiceConfig] = None):
    """Create FastAPI application."""
    service = TokenService(config)
    return service.app


if __name__ == "__main__":
    service = TokenService()
    service.run()
