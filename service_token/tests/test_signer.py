"""
Unit tests for token signing.
"""

import hashlib
import hmac

import pytest

from service_token.app.jwt import (
    InvalidClaims,
    InvalidKey,
    UnsupportedAlgorithm,
    decode,
    sign,
)
from service_token.app.jwt.codec import b64url_decode
from service_token.app.jwt.signer import build_header

REFERENCE_TOKEN = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJzdWIiOiIxIn0"
    ".vVyZrmccWHSiRiP901TjgbqbAtNpDV_vdEuRvUrV1Yk"
)


class TestSign:
    """Test cases for sign()."""

    def test_reference_token(self):
        """Test the well-known HS256 example is reproduced exactly."""
        token = sign({"alg": "HS256", "typ": "JWT"}, {"sub": "1"}, "test")

        assert token == REFERENCE_TOKEN

    def test_sign_is_deterministic(self):
        header = {"alg": "HS256", "typ": "JWT", "cty": "partner-auth;v1"}
        payload = {"sub": "user1", "roles": ["admin", "user"], "exp": 2000000000}

        assert sign(header, payload, b"secret") == sign(dict(header), dict(payload), b"secret")

    def test_str_and_bytes_secret_are_equivalent(self):
        assert sign(None, {"sub": "1"}, "test") == sign(None, {"sub": "1"}, b"test")

    def test_signature_is_hmac_over_first_two_segments(self):
        """Test the third segment is HMAC-SHA256 of 'header.payload'."""
        token = sign(None, {"sub": "1"}, b"secret")
        header_seg, payload_seg, sig_seg = token.split(".")

        expected = hmac.new(b"secret", f"{header_seg}.{payload_seg}".encode("ascii"), hashlib.sha256).digest()

        assert b64url_decode(sig_seg) == expected

    @pytest.mark.parametrize("alg,digest_size", [("HS256", 32), ("HS384", 48), ("HS512", 64)])
    def test_hash_selected_by_alg(self, alg, digest_size):
        token = sign({"alg": alg}, {"sub": "1"}, b"secret")

        assert len(b64url_decode(token.split(".")[2])) == digest_size
        assert decode(token).header["alg"] == alg

    def test_no_padding_in_token(self):
        token = sign(None, {"sub": "12"}, b"secret")

        assert "=" not in token
        assert token.count(".") == 2

    def test_custom_header_fields_preserved(self):
        """Test unknown header fields are carried verbatim."""
        header = {"alg": "HS256", "typ": "JWT", "cty": "partner-auth;v1", "kid": "k1"}

        token = sign(header, {"sub": "1"}, b"secret")

        assert decode(token).header == header

    def test_no_claims_injected(self):
        """Test signing adds neither exp nor iat."""
        token = sign(None, {"sub": "1"}, b"secret")

        assert decode(token).payload == {"sub": "1"}

    def test_caller_header_not_mutated(self):
        header = {"cty": "text"}

        sign(header, {"sub": "1"}, b"secret")

        assert header == {"cty": "text"}

    @pytest.mark.parametrize("alg", ["none", "None", "RS256", "ES256", "hs256", "", None, 256])
    def test_unsupported_algorithm(self, alg):
        with pytest.raises(UnsupportedAlgorithm) as exc_info:
            sign({"alg": alg}, {"sub": "1"}, b"secret")

        assert exc_info.value.code == "UNSUPPORTED_ALGORITHM"

    @pytest.mark.parametrize("secret", [b"", "", None, 42])
    def test_invalid_secret(self, secret):
        with pytest.raises(InvalidKey):
            sign(None, {"sub": "1"}, secret)

    @pytest.mark.parametrize("payload", [None, ["a"], "claims", 1])
    def test_payload_must_be_mapping(self, payload):
        with pytest.raises(InvalidClaims):
            sign(None, payload, b"secret")

    def test_header_must_be_mapping(self):
        with pytest.raises(InvalidClaims):
            sign("HS256", {"sub": "1"}, b"secret")


class TestBuildHeader:
    """Test cases for header defaults."""

    def test_defaults(self):
        assert build_header() == {"alg": "HS256", "typ": "JWT"}

    def test_explicit_values_win(self):
        assert build_header({"alg": "HS512", "typ": "at+jwt"}) == {"alg": "HS512", "typ": "at+jwt"}

    def test_partial_header_completed(self):
        assert build_header({"cty": "json"}) == {"alg": "HS256", "typ": "JWT", "cty": "json"}
