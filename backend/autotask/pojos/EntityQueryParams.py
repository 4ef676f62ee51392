"""
POJO for the `search` parameter sent to entity query endpoints.
"""
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from autotask.pojos.FilterTree import FilterTree
from autotask.pojos.QueryFilter import QueryFilter

FilterNode = Union[QueryFilter, FilterTree]


@dataclass
class EntityQueryParams:
    filter: List[FilterNode] = field(default_factory=list)
    fields: List[str] = field(default_factory=list)
    maxRecords: int = 0

    def withFields(self, *fields: str) -> 'EntityQueryParams':
        self.fields = list(fields)
        return self

    def withMaxRecords(self, maxRecords: int) -> 'EntityQueryParams':
        self.maxRecords = maxRecords
        return self

    def toDict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.filter:
            result['filter'] = [node.toDict() for node in self.filter]
        if self.fields:
            result['fields'] = list(self.fields)
        if self.maxRecords:
            result['maxRecords'] = self.maxRecords
        return result

    def toSearchJSON(self) -> str:
        """Compact JSON blob for the `search` query parameter."""
        return json.dumps(self.toDict(), separators=(',', ':'))
