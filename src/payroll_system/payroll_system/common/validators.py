from __future__ import annotations

import math
from typing import Iterable, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def optional_text(value, field_name: str) -> Optional[str]:
    """Strip free text; blank or missing becomes None."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value.strip() or None


def require_finite(value, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a finite number")
    return number


def require_non_negative(value, field_name: str) -> float:
    number = require_finite(value, field_name)
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number


def require_percentage(value, field_name: str) -> float:
    number = require_non_negative(value, field_name)
    if number > 100:
        raise ValidationError(f"{field_name} must be between 0 and 100")
    return number


def require_weekdays(values: Iterable, field_name: str) -> frozenset[int]:
    days: set[int] = set()
    for v in values or ():
        try:
            day = int(v)
        except (TypeError, ValueError):
            raise ValidationError(f"{field_name} contains an invalid weekday {v!r}")
        if not 0 <= day <= 6:
            raise ValidationError(f"{field_name} weekdays must be 0 (Monday) to 6 (Sunday)")
        days.add(day)
    return frozenset(days)
