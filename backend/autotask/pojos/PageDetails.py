"""
POJO for pagination details returned by list endpoints.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class PageDetails:
    pageNumber: int = 0
    pageSize: int = 0
    count: int = 0
    nextPageUrl: Optional[str] = None
    prevPageUrl: Optional[str] = None

    @staticmethod
    def fromAPIResponse(data: Optional[Dict[str, Any]]) -> 'PageDetails':
        data = data or {}
        return PageDetails(
            pageNumber=int(data.get('pageNumber') or 0),
            pageSize=int(data.get('pageSize') or 0),
            count=int(data.get('count') or 0),
            nextPageUrl=data.get('nextPageUrl') or None,
            prevPageUrl=data.get('prevPageUrl') or None
        )
