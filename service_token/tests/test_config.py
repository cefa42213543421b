"""
Tests for service configuration.
"""

import pytest

from shared.config import get_config


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("JWT_SECRET", "TOKEN_JWT_SECRET", "PORT", "TOKEN_PORT", "PARTNER_API_KEY",
                 "TOKEN_PARTNER_API_KEY", "TOKEN_JWT_ALGORITHM", "TOKEN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = get_config("token")

    assert config.service_name == "token"
    assert config.port == 3000
    assert config.jwt_algorithm == "HS256"
    assert config.jwt_leeway_seconds == 0
    assert config.partner_token_ttl == 3600
    assert config.secret_bytes() == b"fallback-secret-key"


def test_secret_from_plain_environment_name(monkeypatch):
    """Test JWT_SECRET is honoured without the service prefix."""
    monkeypatch.setenv("JWT_SECRET", "from-env")

    assert get_config("token").secret_bytes() == b"from-env"


def test_prefixed_environment(monkeypatch):
    monkeypatch.setenv("TOKEN_JWT_ALGORITHM", "HS384")
    monkeypatch.setenv("TOKEN_LOG_LEVEL", "debug")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("PARTNER_API_KEY", "partner-1")

    config = get_config("token")

    assert config.jwt_algorithm == "HS384"
    assert config.log_level == "debug"
    assert config.port == 8080
    assert config.partner_api_key == "partner-1"


def test_explicit_port_wins(monkeypatch):
    monkeypatch.setenv("PORT", "8080")

    assert get_config("token", 9000).port == 9000


def test_secret_hidden_from_repr():
    config = get_config("token", jwt_secret="super-secret-value")

    assert "super-secret-value" not in repr(config)
    assert config.secret_bytes() == b"super-secret-value"
