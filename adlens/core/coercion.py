"""AdLens — Numeric Coercion Utilities.

Ad-platform payloads mix strings, numbers, nulls and nested objects for the
same field. These helpers turn any JSON value into a usable primitive and
never raise; a value that cannot be read becomes the fallback.
"""

import math
from typing import Any


def to_number(value: Any, fallback: float = 0.0) -> float:
    """Return ``value`` as a finite float, or ``fallback``."""
    # bool is an int subclass; JSON true/false is not a metric
    if isinstance(value, bool):
        return fallback
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return fallback
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return fallback
    else:
        return fallback
    return number if math.isfinite(number) else fallback


def to_int(value: Any, fallback: int = 0) -> int:
    """Return ``value`` as an int truncated toward zero, or ``fallback``."""
    number = to_number(value, fallback=math.nan)
    if math.isnan(number):
        return fallback
    return int(number)


def to_safe_string(value: Any, fallback: str = "") -> str:
    """Stringify a primitive; ``None`` and containers give ``fallback``."""
    if value is None:
        return fallback
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if not math.isfinite(value):
            return fallback
        return str(int(value)) if value.is_integer() else str(value)
    if isinstance(value, (int, str)):
        return str(value)
    return fallback


def dig(payload: Any, *path: Any) -> Any:
    """Walk nested dicts/lists along ``path``; ``None`` if any step is missing."""
    current = payload
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or not -len(current) <= step < len(current):
                return None
            current = current[step]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(step)
        if current is None:
            return None
    return current
