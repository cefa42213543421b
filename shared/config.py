"""
Shared configuration management for the Token Service.
"""

from typing import List, Optional

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TOKEN_",
        case_sensitive=False,
        populate_by_name=True,
        extra="allow"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")

    # Signing
    jwt_secret: SecretStr = Field(
        default=SecretStr("fallback-secret-key"),
        validation_alias=AliasChoices("TOKEN_JWT_SECRET", "JWT_SECRET", "jwt_secret"),
    )
    jwt_algorithm: str = Field(default="HS256")
    jwt_leeway_seconds: int = Field(default=0, ge=0)
    issue_iat: bool = Field(default=True)

    # Partner tokens
    partner_api_key: str = Field(
        default="demo-api-key",
        validation_alias=AliasChoices("TOKEN_PARTNER_API_KEY", "PARTNER_API_KEY", "partner_api_key"),
    )
    partner_issuer: str = Field(default="token-service")
    partner_content_type: str = Field(default="partner-auth;v1")
    partner_token_ttl: int = Field(default=3600, gt=0)

    # HTTP
    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"])

    def secret_bytes(self) -> bytes:
        """Signing secret as raw bytes."""
        return self.jwt_secret.get_secret_value().encode("utf-8")


class ServiceConfig(BaseConfig):
    """Service-specific configuration."""

    service_name: str
    host: str = Field(default="0.0.0.0")
    port: int = Field(
        default=3000,
        validation_alias=AliasChoices("TOKEN_PORT", "PORT", "port"),
    )


def get_config(service_name: str, port: Optional[int] = None, **overrides) -> ServiceConfig:
    """Get configuration for a specific service."""
    if port is not None:
        overrides["port"] = port
    return ServiceConfig(service_name=service_name, **overrides)
