"""
Registered claim helpers.
"""

from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Union

from .errors import InvalidClaims

Number = Union[int, float]


def numeric_date(claims: Mapping[str, Any], name: str) -> Optional[Number]:
    """Return the NumericDate claim `name`, or None when absent."""
    if name not in claims:
        return None
    value = claims[name]
    # bool is an int subclass but never a valid timestamp
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidClaims(
            f"Claim {name!r} must be a number of seconds since the epoch",
            details={"claim": name}
        )
    return value


def to_datetime(value: Optional[Number]) -> Optional[datetime]:
    """UTC datetime for a NumericDate, or None when absent or outside datetime range."""
    if value is None:
        return None
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def expires_at(claims: Mapping[str, Any]) -> Optional[datetime]:
    return to_datetime(numeric_date(claims, "exp"))
