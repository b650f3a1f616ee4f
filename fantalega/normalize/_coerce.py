"""Value coercion shared by the normalizers."""

from __future__ import annotations

import math
from typing import Any, Optional


def to_float(value: Any) -> Optional[float]:
    """Finite float from a number or numeric string, else None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def to_int(value: Any) -> Optional[int]:
    """Integral value only: "2" and 2.0 pass, "2.7" does not."""
    number = to_float(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def to_name(value: Any) -> Optional[str]:
    if value is None:
        return None
    name = str(value).strip()
    return name or None
