"""
POJO for a single query predicate.
"""
from dataclasses import dataclass
from typing import Any, Dict

from autotask.enums.QueryOperator import QueryOperator


@dataclass
class QueryFilter:
    field: str
    op: QueryOperator
    value: Any = None

    def toDict(self) -> Dict[str, Any]:
        result = {'field': self.field, 'op': self.op.value}
        if self.value is not None:
            result['value'] = self.value
        return result
