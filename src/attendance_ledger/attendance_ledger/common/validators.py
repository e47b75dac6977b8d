from __future__ import annotations

from ..core.enums import PresenceStatus
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_iso_date(value: str, field_name: str) -> str:
    """Validate a YYYY-MM-DD string and return it normalized."""
    value = require_non_empty(value, field_name)
    try:
        return parse_iso_date(value).isoformat()
    except ValueError:
        raise ValidationError(f"{field_name} must use the YYYY-MM-DD format") from None


def require_status(value) -> PresenceStatus:
    if isinstance(value, PresenceStatus):
        return value
    try:
        return PresenceStatus(str(value or "").strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown attendance status: {value!r}") from None
