"""
POJO for a single panel query.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from autotask.Constants import DEFAULT_MAX_RECORDS
from datasource.enums.QueryType import QueryType
from datasource.pojos.TimeRange import TimeRange


@dataclass
class QueryModel:
    refId: str
    queryType: QueryType
    filter: str = ""
    timeField: str = ""
    maxRecords: int = 0
    timeRange: Optional[TimeRange] = None

    @property
    def recordLimit(self) -> int:
        return self.maxRecords if self.maxRecords > 0 else DEFAULT_MAX_RECORDS

    @staticmethod
    def fromDict(data: Dict[str, Any], defaultTimeRange: Optional[TimeRange] = None) -> 'QueryModel':
        """
        Raises:
            ValueError: unknown queryType or malformed fields
        """
        if not isinstance(data, dict):
            raise ValueError(f"query must be an object: {data!r}")

        maxRecords = data.get('maxRecords') or 0
        if isinstance(maxRecords, bool) or not isinstance(maxRecords, (int, float, str)):
            raise ValueError(f"maxRecords must be an integer: {maxRecords!r}")
        try:
            maxRecords = int(float(maxRecords))
        except (ValueError, OverflowError) as e:
            raise ValueError(f"maxRecords must be an integer: {maxRecords!r}") from e

        filterExpression = data.get('filter') or ""
        if not isinstance(filterExpression, str):
            raise ValueError("filter must be a string")

        timeField = data.get('timeField') or ""
        if not isinstance(timeField, str):
            raise ValueError("timeField must be a string")

        return QueryModel(
            refId=str(data.get('refId') or ""),
            queryType=QueryType.fromString(data.get('queryType') or ""),
            filter=filterExpression,
            timeField=timeField.strip(),
            maxRecords=maxRecords,
            timeRange=TimeRange.fromDict(data.get('timeRange')) or defaultTimeRange
        )
