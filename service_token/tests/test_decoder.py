"""
Unit tests for unverified decoding.
"""

from datetime import datetime, timezone

import pytest

from service_token.app.jwt import DecodedToken, MalformedToken, decode, sign
from service_token.app.jwt.codec import b64url_encode, encode_segment


class TestDecode:
    """Test cases for decode()."""

    def test_round_trip(self):
        """Test decode(sign(h, p, s)) returns h and p."""
        header = {"alg": "HS384", "typ": "JWT", "cty": "partner-auth;v1"}
        payload = {"sub": "user1", "nested": {"b": [1, 2], "a": None}, "name": "José"}

        decoded = decode(sign(header, payload, b"secret"))

        assert decoded.header == header
        assert decoded.payload == payload

    def test_signature_segment_exposed(self):
        token = sign(None, {"sub": "1"}, b"secret")

        assert decode(token).signature == token.split(".")[2]

    def test_ignores_signature(self):
        """Test a token signed with any secret decodes the same way."""
        token = sign(None, {"sub": "1"}, b"one")
        tampered = token.rsplit(".", 1)[0] + ".c2ln"

        assert decode(tampered).payload == {"sub": "1"}

    def test_ignores_expiry_and_algorithm(self):
        token = ".".join([
            encode_segment({"alg": "none"}),
            encode_segment({"sub": "1", "exp": 1, "nbf": 9999999999}),
            "c2ln",
        ])

        decoded = decode(token)

        assert decoded.header == {"alg": "none"}
        assert decoded.expires_at == datetime.fromtimestamp(1, tz=timezone.utc)

    def test_expires_at_absent(self):
        assert decode(sign(None, {"sub": "1"}, b"secret")).expires_at is None

    def test_expires_at_unusable(self):
        token = sign(None, {"exp": "tomorrow"}, b"secret")

        assert decode(token).expires_at is None

    def test_returns_frozen_value(self):
        decoded = decode(sign(None, {"sub": "1"}, b"secret"))

        assert isinstance(decoded, DecodedToken)
        with pytest.raises(AttributeError):
            decoded.signature = "x"

    @pytest.mark.parametrize("token", [
        "",
        "not-a-token",
        "a.b",
        "a.b.c.d",
        "%%%.eyJzdWIiOiIxIn0.c2ln",
    ])
    def test_malformed(self, token):
        with pytest.raises(MalformedToken):
            decode(token)

    def test_payload_not_json(self):
        token = ".".join([encode_segment({"alg": "HS256"}), b64url_encode(b"not json"), "c2ln"])

        with pytest.raises(MalformedToken) as exc_info:
            decode(token)

        assert "payload" in exc_info.value.message
