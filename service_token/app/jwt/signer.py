"""
Token signing.
"""

from typing import Any, Dict, Mapping, Optional, Union

from .algorithms import DEFAULT_ALGORITHM, compute_mac, get_hash_function, normalize_secret
from .codec import b64url_encode, encode_segment, join_segments, signing_input
from .errors import InvalidClaims

DEFAULT_TYPE = "JWT"


def build_header(header: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Copy `header`, filling in `alg` and `typ` when the caller left them out."""
    if header is None:
        header = {}
    if not isinstance(header, Mapping):
        raise InvalidClaims(f"Header must be a JSON object, got {type(header).__name__}")
    result = dict(header)
    result.setdefault("alg", DEFAULT_ALGORITHM)
    result.setdefault("typ", DEFAULT_TYPE)
    return result


def sign(
    header: Optional[Mapping[str, Any]],
    payload: Mapping[str, Any],
    secret: Union[bytes, str],
) -> str:
    """Sign `payload` and return the compact token.

    The hash is selected by the header's `alg`. No claims are added, so a
    payload without `exp` produces a token that never expires.
    """
    full_header = build_header(header)
    alg = full_header["alg"]
    get_hash_function(alg)
    key = normalize_secret(secret)

    header_seg = encode_segment(full_header)
    payload_seg = encode_segment(payload)
    mac = compute_mac(alg, key, signing_input(header_seg, payload_seg))
    return join_segments(header_seg, payload_seg, b64url_encode(mac))
