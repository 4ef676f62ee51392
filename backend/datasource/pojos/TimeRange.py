"""
POJO for a Grafana query time range.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from datasource.utils.DateUtils import formatRFC3339, parseRangeBoundary


@dataclass
class TimeRange:
    start: datetime
    end: datetime

    @property
    def startRFC3339(self) -> str:
        return formatRFC3339(self.start)

    @property
    def endRFC3339(self) -> str:
        return formatRFC3339(self.end)

    @staticmethod
    def fromDict(data: Optional[Dict[str, Any]]) -> Optional['TimeRange']:
        """
        Parse {"from": ..., "to": ...}. Boundaries are epoch milliseconds or ISO 8601.

        Raises:
            ValueError: data is not an object, a boundary is present but
                unparsable, or from is after to
        """
        if not data:
            return None
        if not isinstance(data, dict):
            raise ValueError(f"time range must be an object: {data!r}")
        if data.get('from') in (None, '') or data.get('to') in (None, ''):
            return None

        timeRange = TimeRange(start=parseRangeBoundary(data['from']), end=parseRangeBoundary(data['to']))
        if timeRange.start > timeRange.end:
            raise ValueError("time range 'from' is after 'to'")
        return timeRange
