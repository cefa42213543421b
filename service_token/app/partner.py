"""
Fixed-format partner tokens.

Partner tokens always carry the service's own header and a short-lived
payload whose `jti` combines the partner API key with the issue time.
"""

from typing import Any, Dict

from shared.config import BaseConfig


def build_partner_header(config: BaseConfig) -> Dict[str, Any]:
    return {
        "alg": config.jwt_algorithm,
        "typ": "JWT",
        "cty": config.partner_content_type,
    }


def build_partner_claims(api_key: str, issuer: str, issued_at: int, ttl: int = 3600) -> Dict[str, Any]:
    """Claims for a partner token issued at `issued_at` (Unix seconds)."""
    return {
        "iss": issuer,
        "iat": issued_at,
        "exp": issued_at + ttl,
        "jti": f"{api_key}-{issued_at}",
    }
