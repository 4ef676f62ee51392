"""
POJO for Autotask's native nested filter format.
"""
import json
import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from autotask.enums.QueryOperator import QueryOperator
from autotask.pojos.QueryFilter import QueryFilter

LOGICAL_OPERATORS = frozenset({'and', 'or'})

NATIVE_OPERATORS = frozenset({
    'eq', 'noteq', 'gt', 'gte', 'lt', 'lte', 'beginsWith', 'endsWith',
    'contains', 'exist', 'notExist', 'in', 'notIn',
}) | frozenset(operator.value for operator in QueryOperator)


@dataclass
class FilterTree:
    """
    One node of a filter tree.

    Logical nodes carry `items`, leaf nodes carry `field` and optionally `value`:
        {"op": "and", "items": [{"op": "gte", "field": "createDate", "value": "..."}]}
    """
    op: str
    field: Optional[str] = None
    value: Any = None
    items: List['FilterTree'] = dataclasses.field(default_factory=list)

    @property
    def isLogical(self) -> bool:
        return self.op in LOGICAL_OPERATORS

    def validate(self) -> tuple[bool, Optional[str]]:
        """
        Validate this node and its children.

        Returns:
            Tuple of (isValid, errorMessage)
        """
        if self.isLogical:
            if not self.items:
                return False, f"'{self.op}' filter needs at least one item"
            for item in self.items:
                isValid, errorMessage = item.validate()
                if not isValid:
                    return False, errorMessage
            return True, None

        if self.op not in NATIVE_OPERATORS:
            return False, f"unsupported filter operator: {self.op}"
        if not self.field:
            return False, f"'{self.op}' filter needs a field"
        return True, None

    @classmethod
    def fromDict(cls, data: Dict[str, Any]) -> 'FilterTree':
        if not isinstance(data, dict) or 'op' not in data:
            raise ValueError(f"filter node must be an object with an 'op': {data!r}")
        return cls(
            op=str(data['op']),
            field=data.get('field'),
            value=data.get('value'),
            items=[cls.fromDict(item) for item in data.get('items') or []]
        )

    @classmethod
    def parseJSON(cls, text: str) -> List['FilterTree']:
        """Parse a JSON object or array of objects into validated nodes."""
        try:
            parsed: Union[dict, list] = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"invalid filter JSON: {e}") from e

        nodes = [cls.fromDict(item) for item in (parsed if isinstance(parsed, list) else [parsed])]
        for node in nodes:
            isValid, errorMessage = node.validate()
            if not isValid:
                raise ValueError(errorMessage)
        return nodes

    @classmethod
    def fromQueryFilter(cls, queryFilter: QueryFilter) -> 'FilterTree':
        return cls(op=queryFilter.op.value, field=queryFilter.field, value=queryFilter.value)

    @classmethod
    def conjunction(cls, *nodes: 'FilterTree') -> 'FilterTree':
        return cls(op='and', items=list(nodes))

    def toDict(self) -> Dict[str, Any]:
        if self.isLogical:
            return {'op': self.op, 'items': [item.toDict() for item in self.items]}
        result: Dict[str, Any] = {'op': self.op, 'field': self.field}
        if self.value is not None:
            result['value'] = self.value
        return result
