"""
Compact serialization codec.

A token is three base64url segments joined by dots. The first two segments
carry JSON objects serialized with sorted keys and no whitespace, so the same
header and claims always encode to the same text.
"""

import base64
import binascii
import json
import math
import re
from typing import Any, Dict, Mapping, Tuple

from .errors import InvalidClaims, MalformedSegment, MalformedToken

SEPARATOR = "."

_B64URL_CHARS = re.compile(r"[A-Za-z0-9_-]*")


def b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(text: str) -> bytes:
    """Decode unpadded base64url, rejecting non-canonical input.

    An encoding with unused trailing bits set decodes to the same bytes as
    its canonical form, so it is rejected to keep text and bytes one-to-one.
    """
    if not isinstance(text, str) or not _B64URL_CHARS.fullmatch(text) or len(text) % 4 == 1:
        raise MalformedSegment("Segment is not valid base64url")
    try:
        data = base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))
    except (binascii.Error, ValueError) as exc:
        raise MalformedSegment("Segment is not valid base64url") from exc
    if b64url_encode(data) != text:
        raise MalformedSegment("Segment is not canonical base64url")
    return data


def canonical_json(value: Mapping[str, Any]) -> bytes:
    try:
        return json.dumps(
            value,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        ).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise InvalidClaims(f"Value is not JSON serializable: {exc}") from exc


def encode_segment(value: Mapping[str, Any]) -> str:
    if not isinstance(value, Mapping):
        raise InvalidClaims(
            f"Expected a JSON object, got {type(value).__name__}"
        )
    return b64url_encode(canonical_json(dict(value)))


def _reject_constant(name: str):
    raise ValueError(f"{name} is not a JSON value")


def _finite_float(text: str) -> float:
    value = float(text)
    # overflowing literals such as 1e400 parse to inf
    if math.isinf(value):
        raise ValueError(f"{text} is out of range")
    return value


def decode_segment(text: str) -> Dict[str, Any]:
    raw = b64url_decode(text)
    try:
        value = json.loads(raw.decode("utf-8"), parse_constant=_reject_constant,
                           parse_float=_finite_float)
    except (UnicodeDecodeError, ValueError) as exc:
        raise MalformedSegment("Segment is not valid JSON") from exc
    if not isinstance(value, dict):
        raise MalformedSegment("Segment is not a JSON object")
    return value


def split_token(token: str) -> Tuple[str, str, str]:
    if not isinstance(token, str):
        raise MalformedToken("Token must be a string")
    if not token.isascii():
        raise MalformedToken("Token contains non-ASCII characters")
    parts = token.split(SEPARATOR)
    if len(parts) != 3:
        raise MalformedToken(
            "Token must have exactly three segments",
            details={"segments": len(parts)}
        )
    if not all(parts):
        raise MalformedToken("Token segments must be non-empty")
    header_seg, payload_seg, sig_seg = parts
    return header_seg, payload_seg, sig_seg


def signing_input(header_seg: str, payload_seg: str) -> bytes:
    return f"{header_seg}{SEPARATOR}{payload_seg}".encode("ascii")


def join_segments(*segments: str) -> str:
    return SEPARATOR.join(segments)
