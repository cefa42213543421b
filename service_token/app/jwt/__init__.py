"""
HMAC-signed compact token engine.

Three operations, all pure and safe to call concurrently:

- sign(header, payload, secret) -> token
- verify(token, secret, expected_alg) -> VerifiedToken
- decode(token) -> DecodedToken (no signature or time checks)

Failures are raised as subclasses of `TokenError`; see `errors`.
"""

from .algorithms import DEFAULT_ALGORITHM, SUPPORTED_ALGORITHMS
from .decoder import DecodedToken, decode
from .errors import (
    AlgorithmMismatch,
    InvalidClaims,
    InvalidKey,
    InvalidSignature,
    MalformedSegment,
    MalformedToken,
    TokenError,
    TokenExpired,
    TokenNotYetValid,
    UnsupportedAlgorithm,
)
from .signer import sign
from .verifier import TokenVerifier, VerifiedToken, verify

__all__ = [
    "DEFAULT_ALGORITHM",
    "SUPPORTED_ALGORITHMS",
    "AlgorithmMismatch",
    "DecodedToken",
    "InvalidClaims",
    "InvalidKey",
    "InvalidSignature",
    "MalformedSegment",
    "MalformedToken",
    "TokenError",
    "TokenExpired",
    "TokenNotYetValid",
    "TokenVerifier",
    "UnsupportedAlgorithm",
    "VerifiedToken",
    "decode",
    "sign",
    "verify",
]
