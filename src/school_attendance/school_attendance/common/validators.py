from __future__ import annotations

from ..core.exceptions import ValidationError
from .datetime_utils import is_iso_date


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_iso_date(value: str, field_name: str = "Date") -> str:
    if not is_iso_date(value):
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date, got {value!r}")
    return value
