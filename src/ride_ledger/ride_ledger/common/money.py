from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

from ..core.constants import CURRENCY_CODE, CURRENCY_SYMBOL

ZERO = Decimal("0")


def parse_amount(value: Any) -> Optional[Decimal]:
    """Exact decimal for a stored fare, or None when it is not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, float):
        # repr round-trip keeps 12.5 as 12.5 instead of its binary expansion
        amount = Decimal(repr(value)) if value == value else None
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            amount = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None

    if amount is None or not amount.is_finite():
        return None
    return amount


def to_amount(value: Any) -> Decimal:
    """Lenient fare reader: missing or non-numeric fares count as zero."""
    amount = parse_amount(value)
    return ZERO if amount is None else amount


def _quantize(value: Any, decimals: int) -> Decimal:
    return to_amount(value).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def format_sar(value: Any, decimals: int = 0) -> str:
    """UI formatting with the Saudi Riyal symbol."""
    return f"{CURRENCY_SYMBOL} {_quantize(value, decimals)}"


def format_sar_text(value: Any, decimals: int = 0) -> str:
    """Plain-text formatting ("SAR 25") for messages and exports."""
    return f"{CURRENCY_CODE} {_quantize(value, decimals)}"
