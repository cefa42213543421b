"""
Unverified token decoding.

Output of `decode` is not authenticated. Use it for inspection and
debugging only; use `verify` before trusting any claim.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from .claims import expires_at
from .codec import decode_segment, split_token
from .errors import InvalidClaims, MalformedToken


@dataclass(frozen=True)
class DecodedToken:
    header: Dict[str, Any]
    payload: Dict[str, Any]
    signature: str

    @property
    def expires_at(self) -> Optional[datetime]:
        """Expiration instant, or None when `exp` is absent or unusable."""
        try:
            return expires_at(self.payload)
        except InvalidClaims:
            return None


def decode_parts(token: str) -> Tuple[Dict[str, Any], Dict[str, Any], Tuple[str, str, str]]:
    """Split and decode a token, returning header, payload and the raw segments."""
    segments = split_token(token)
    header_seg, payload_seg, _ = segments
    try:
        header = decode_segment(header_seg)
    except MalformedToken as exc:
        raise MalformedToken(f"Invalid token header: {exc.message}") from exc
    try:
        payload = decode_segment(payload_seg)
    except MalformedToken as exc:
        raise MalformedToken(f"Invalid token payload: {exc.message}") from exc
    return header, payload, segments


def decode(token: str) -> DecodedToken:
    header, payload, segments = decode_parts(token)
    return DecodedToken(header=header, payload=payload, signature=segments[2])
