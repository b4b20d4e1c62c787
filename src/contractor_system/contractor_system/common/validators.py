from __future__ import annotations

import math
from datetime import date
from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return value.strip()


def require_int(value: Any, message: str) -> int:
    # bool is an int subclass; True is not a contractor number.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(message)
    return value


def require_non_negative(value: Any, message: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(message) from exc
    if not math.isfinite(number) or number < 0:
        raise ValidationError(message)
    return number


def require_not_after(value: date, limit: date, message: str) -> date:
    if value > limit:
        raise ValidationError(message)
    return value
