"""
Date parsing and formatting for Autotask timestamps and Grafana time ranges.
"""
import logging
import re
from datetime import datetime, timezone
from typing import Any, Optional

from dateutil import parser as dateParser

logger = logging.getLogger(__name__)

# RFC3339 with a zone, the same without one (read as UTC), or a bare date
AUTOTASK_TIME_PATTERN = re.compile(
    r'^\d{4}-\d{2}-\d{2}(T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})?)?$'
)


def parseTime(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an Autotask date string.

    Accepts RFC3339 (with Z or an offset), YYYY-MM-DDTHH:MM:SS with optional
    fractional seconds of any precision, and YYYY-MM-DD. Zone-less values are UTC.
    Empty values and anything unparsable yield None; the latter is logged.

    Examples:
        "2023-01-15T10:00:00Z" -> 2023-01-15 10:00:00+00:00
        "2023-01-15T10:00:00" -> 2023-01-15 10:00:00+00:00
        "2023-01-15T10:00:00.1234567" -> 2023-01-15 10:00:00.123456+00:00
        "not a date" -> None
    """
    if not value:
        return None

    value = value.strip()
    if AUTOTASK_TIME_PATTERN.match(value):
        try:
            parsed = dateParser.isoparse(value)
        except ValueError:
            parsed = None
        if parsed is not None:
            return parsed if parsed.tzinfo is not None else parsed.replace(tzinfo=timezone.utc)

    logger.warning("DATE_UTILS :: Failed to parse time | Value: %s", value)
    return None


def parseRangeBoundary(value: Any) -> datetime:
    """
    Parse one end of a Grafana time range: epoch milliseconds (number or
    numeric string) or an ISO 8601 timestamp.

    Raises:
        ValueError: value is neither, or lies outside the representable range
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"invalid time range value: {value!r}")

    text = value.strip() if isinstance(value, str) else None
    if text == "":
        raise ValueError(f"invalid time range value: {value!r}")

    try:
        if text is None:
            return datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
        if text.lstrip('-').isdigit():
            return datetime.fromtimestamp(int(text) / 1000.0, tz=timezone.utc)
        parsed = dateParser.isoparse(text)
    except (OverflowError, OSError, ValueError) as e:
        raise ValueError(f"invalid time range value: {value!r}") from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def toEpochMillis(value: Optional[datetime]) -> Optional[int]:
    if value is None:
        return None
    return int(value.timestamp() * 1000)


def formatRFC3339(value: datetime) -> str:
    """Format as second-precision RFC3339 in UTC, e.g. 2024-01-01T00:00:00Z."""
    return value.astimezone(timezone.utc).strftime('%Y-%m-%dT%H:%M:%SZ')
