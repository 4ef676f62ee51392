"""
Utility functions for coercing loosely typed Autotask JSON values.
"""
from typing import Any, Optional


def toBool(value: Any) -> bool:
    """
    Autotask reports flags as booleans on some entities and as 0/1 on others.

    Examples:
        True -> True
        1 -> True
        "true" -> True
        None -> False
    """
    if isinstance(value, str):
        return value.strip().lower() in ('true', '1')
    return bool(value)


def toOptionalInt(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def firstPresent(data: dict, *keys: str) -> Any:
    """Return the value of the first key present in data (None when none are)."""
    for key in keys:
        if key in data:
            return data[key]
    return None


def compactDict(data: dict) -> dict:
    """Drop None values so PATCH payloads only carry the fields that were set."""
    return {key: value for key, value in data.items() if value is not None}
