"""
Input validation for user-entered values.

Validation failures are never raised: helpers return None/False and the
caller turns that into a user-facing message.
"""

import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional


def to_float(v: Any) -> Optional[float]:
    """Safely convert a value to float, or return None."""
    try:
        if v in (None, ""):
            return None
        value = float(v)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def positive_float(v: Any) -> Optional[float]:
    """Return `v` as a float when it is a number greater than zero."""
    value = to_float(v)
    if value is None or value <= 0:
        return None
    return value


def is_valid_email(email: Any) -> bool:
    if not isinstance(email, str):
        return False
    email = email.strip()
    return bool(email) and "@" in email


def to_decimal(v: Any) -> Decimal:
    """Decimal built from the shortest repr, so 1.2 stays exactly 1.2."""
    try:
        return Decimal(str(v))
    except InvalidOperation as e:
        raise ValueError(f"not a number: {v!r}") from e


def round_half_up(v: Any, decimals: int = 0) -> Decimal:
    exponent = Decimal(1).scaleb(-decimals)
    return to_decimal(v).quantize(exponent, rounding=ROUND_HALF_UP)


def keep_last(items: list, limit: int) -> list:
    """The newest `limit` items; a limit of zero or less keeps nothing."""
    if limit <= 0:
        return []
    return items[-limit:]
