"""
Parses the `field=value` filter shorthand into Autotask query filters.
"""
import logging
from typing import Dict, List, Union

from autotask.Constants import LOG_PREFIX_ENTITY, TICKET_STATUS_COMPLETE
from autotask.enums.EntityName import EntityName
from autotask.enums.QueryOperator import QueryOperator
from autotask.pojos.EntityQueryParams import EntityQueryParams, FilterNode
from autotask.pojos.FilterTree import FilterTree
from autotask.pojos.QueryFilter import QueryFilter

logger = logging.getLogger(__name__)

DEFAULT_FILTERS: Dict[EntityName, QueryFilter] = {
    EntityName.COMPANIES: QueryFilter('IsActive', QueryOperator.EQUALS, True),
    EntityName.RESOURCES: QueryFilter('IsActive', QueryOperator.EQUALS, True),
    EntityName.TICKETS: QueryFilter('Status', QueryOperator.NOT_EQUALS, TICKET_STATUS_COMPLETE),
}


class FilterExpressionError(ValueError):
    """The filter expression is neither `field=value` nor filter-tree JSON."""


class FilterExpressionParser:
    """
    Grammar:
        ""                 -> collection default (see DEFAULT_FILTERS)
        "field=true|false" -> field eq <bool>
        "field=<N"         -> field lessThan N
        "field=>N"         -> field greaterThan N
        "field=text"       -> field eq "text"
        "{...}" / "[...]"  -> native filter tree JSON
    """

    @classmethod
    def parse(cls, entityName: EntityName, expression: str) -> List[FilterNode]:
        expression = (expression or "").strip()

        if not expression:
            default = DEFAULT_FILTERS.get(entityName)
            return [QueryFilter(default.field, default.op, default.value)] if default else []

        if expression[0] in '{[':
            try:
                return list(FilterTree.parseJSON(expression))
            except ValueError as e:
                raise FilterExpressionError(str(e)) from e

        return [cls.parseComparison(expression)]

    @classmethod
    def parseComparison(cls, expression: str) -> QueryFilter:
        parts = expression.split('=')
        if len(parts) != 2 or not parts[0].strip():
            raise FilterExpressionError(f"filter must be of the form field=value: {expression}")

        field = parts[0].strip()
        value = parts[1].strip()

        if value == 'true':
            return QueryFilter(field, QueryOperator.EQUALS, True)
        if value == 'false':
            return QueryFilter(field, QueryOperator.EQUALS, False)
        if value.startswith('<'):
            return QueryFilter(field, QueryOperator.LESS_THAN, cls._parseNumber(field, value[1:]))
        if value.startswith('>'):
            return QueryFilter(field, QueryOperator.GREATER_THAN, cls._parseNumber(field, value[1:]))
        return QueryFilter(field, QueryOperator.EQUALS, value)

    @classmethod
    def toQueryParams(cls, entityName: EntityName, expression: str, maxRecords: int = 0) -> EntityQueryParams:
        return EntityQueryParams(filter=cls.parse(entityName, expression), maxRecords=maxRecords)

    @staticmethod
    def _parseNumber(field: str, raw: str) -> Union[int, float]:
        raw = raw.strip()
        try:
            return int(raw)
        except ValueError:
            pass
        try:
            return float(raw)
        except ValueError:
            # Non-numeric comparisons degrade to zero
            logger.warning(
                "%s :: Non-numeric comparison value, using 0 | Field: %s | Value: %s",
                LOG_PREFIX_ENTITY,
                field,
                raw
            )
            return 0
