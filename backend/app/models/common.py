from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def clamp_int(value: Any, minimum: int, maximum: int, fallback: int = 0) -> int:
    """Parse `value` as an int and clamp it into [minimum, maximum].

    Unparseable input (None, "", "abc") returns `fallback` unclamped.
    """
    try:
        number = int(value) if isinstance(value, (int, float)) else int(str(value).strip())
    except (TypeError, ValueError, OverflowError):
        return fallback
    return max(minimum, min(maximum, number))


class ValidationError422(ValueError):
    status_code = 422
