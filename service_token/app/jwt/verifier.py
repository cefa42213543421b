"""
Token verification.

Checks run in a fixed order and stop at the first failure:

1. structure: three segments, header and payload decode to JSON objects
2. algorithm: the header's `alg` equals the algorithm this verifier was
   configured with. The header never selects the algorithm, so a token
   claiming `none` or an asymmetric algorithm is refused outright.
3. signature: HMAC recomputed and compared in constant time
4. time: `exp` and `nbf`, with optional leeway
"""

import hmac
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Union

from .algorithms import DEFAULT_ALGORITHM, compute_mac, get_hash_function, normalize_secret
from .claims import numeric_date, to_datetime
from .codec import b64url_decode, signing_input
from .decoder import decode_parts
from .errors import (
    AlgorithmMismatch,
    InvalidSignature,
    MalformedToken,
    TokenExpired,
    TokenNotYetValid,
)


@dataclass(frozen=True)
class VerifiedToken:
    header: Dict[str, Any]
    payload: Dict[str, Any]
    expires_at: Optional[datetime] = None


class TokenVerifier:
    """Verifier bound to one secret and one algorithm."""

    def __init__(self, secret: Union[bytes, str], algorithm: str = DEFAULT_ALGORITHM, leeway: int = 0):
        get_hash_function(algorithm)
        if leeway < 0:
            raise ValueError("leeway must be non-negative")
        self._secret = normalize_secret(secret)
        self.algorithm = algorithm
        self.leeway = leeway

    def __repr__(self) -> str:
        return f"TokenVerifier(algorithm={self.algorithm!r}, leeway={self.leeway})"

    def verify(self, token: str, now: Optional[int] = None) -> VerifiedToken:
        header, payload, (header_seg, payload_seg, sig_seg) = decode_parts(token)

        self._check_algorithm(header)
        self._check_signature(header_seg, payload_seg, sig_seg)

        if now is None:
            now = int(time.time())
        exp = numeric_date(payload, "exp")
        nbf = numeric_date(payload, "nbf")
        if exp is not None and now >= exp + self.leeway:
            raise TokenExpired(to_datetime(exp))
        if nbf is not None and now < nbf - self.leeway:
            raise TokenNotYetValid(to_datetime(nbf))

        return VerifiedToken(header=header, payload=payload, expires_at=to_datetime(exp))

    def _check_algorithm(self, header: Dict[str, Any]) -> None:
        alg = header.get("alg")
        if alg != self.algorithm:
            raise AlgorithmMismatch(
                f"Token algorithm {alg!r} does not match expected {self.algorithm!r}",
                details={"algorithm": alg, "expected": self.algorithm}
            )

    def _check_signature(self, header_seg: str, payload_seg: str, sig_seg: str) -> None:
        try:
            actual = b64url_decode(sig_seg)
        except MalformedToken as exc:
            raise MalformedToken(f"Invalid token signature: {exc.message}") from exc
        expected = compute_mac(self.algorithm, self._secret, signing_input(header_seg, payload_seg))
        if not hmac.compare_digest(expected, actual):
            raise InvalidSignature()


def verify(
    token: str,
    secret: Union[bytes, str],
    expected_alg: str = DEFAULT_ALGORITHM,
    *,
    leeway: int = 0,
    now: Optional[int] = None,
) -> VerifiedToken:
    return TokenVerifier(secret, expected_alg, leeway).verify(token, now=now)
