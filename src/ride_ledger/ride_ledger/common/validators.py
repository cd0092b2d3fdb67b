from __future__ import annotations

from decimal import Decimal
from typing import Any

from ..core.exceptions import ValidationError
from .money import parse_amount


def text(value: Any, field_name: str) -> str:
    """Stripped text; None reads as empty, anything but a string is rejected."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value.strip()


def require_non_empty(value: Any, field_name: str) -> str:
    cleaned = text(value, field_name)
    if not cleaned:
        raise ValidationError(f"{field_name} is required")
    return cleaned


def require_flag(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ValidationError(f"{field_name} must be true or false")


def optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def require_fare(value: Any, field_name: str = "fare") -> Decimal:
    """Strict fare check for writes; aggregation uses the lenient `to_amount` instead."""
    amount = parse_amount(value)
    if amount is None:
        raise ValidationError(f"{field_name} must be a number")
    if amount < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return amount
