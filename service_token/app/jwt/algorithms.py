"""
Keyed-hash algorithm registry.
"""

import hashlib
import hmac
from typing import Callable, Dict, Union

from .errors import InvalidKey, UnsupportedAlgorithm

DEFAULT_ALGORITHM = "HS256"

HASH_FUNCTIONS: Dict[str, Callable] = {
    "HS256": hashlib.sha256,
    "HS384": hashlib.sha384,
    "HS512": hashlib.sha512,
}

SUPPORTED_ALGORITHMS = tuple(HASH_FUNCTIONS)


def is_supported(alg) -> bool:
    return isinstance(alg, str) and alg in HASH_FUNCTIONS


def get_hash_function(alg) -> Callable:
    """Return the hashlib constructor for `alg` or raise UnsupportedAlgorithm."""
    if not is_supported(alg):
        raise UnsupportedAlgorithm(
            f"Algorithm {alg!r} is not supported",
            details={"algorithm": alg, "supported": list(SUPPORTED_ALGORITHMS)}
        )
    return HASH_FUNCTIONS[alg]


def normalize_secret(secret: Union[bytes, str]) -> bytes:
    if isinstance(secret, str):
        secret = secret.encode("utf-8")
    if not isinstance(secret, (bytes, bytearray)) or not secret:
        raise InvalidKey()
    return bytes(secret)


def compute_mac(alg: str, secret: bytes, message: bytes) -> bytes:
    return hmac.new(secret, message, get_hash_function(alg)).digest()
