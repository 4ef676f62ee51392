"""
Builds Autotask query parameters for a panel query.
"""
import logging
from typing import List

from autotask.Constants import MAX_RECORDS_PER_PAGE
from autotask.FilterExpressionParser import FilterExpressionParser
from autotask.pojos.EntityQueryParams import EntityQueryParams, FilterNode
from autotask.pojos.FilterTree import FilterTree
from autotask.pojos.QueryFilter import QueryFilter
from datasource.Constants import LOG_PREFIX
from datasource.pojos.QueryModel import QueryModel

logger = logging.getLogger(__name__)


class QueryBuilder:

    @classmethod
    def buildParams(cls, queryModel: QueryModel) -> EntityQueryParams:
        """
        Parse the user filter and, when a timeField is set, conjoin it with
        the query's time range:

            {"op": "and", "items": [<user filter>, {"op": "and", "items": [
                {"op": "gte", "field": <timeField>, "value": <from>},
                {"op": "lte", "field": <timeField>, "value": <to>}]}]}

        Raises:
            FilterExpressionError: the filter is malformed
        """
        nodes = FilterExpressionParser.parse(queryModel.queryType.entityName, queryModel.filter)

        if queryModel.timeField and queryModel.timeRange is not None:
            timeNode = cls.timeRangeNode(queryModel)
            if nodes:
                nodes = [FilterTree.conjunction(*cls._asTreeNodes(nodes), timeNode)]
            else:
                nodes = [timeNode]
        elif queryModel.timeField:
            logger.warning(
                "%s :: timeField set without a time range, ignoring | RefId: %s | Field: %s",
                LOG_PREFIX,
                queryModel.refId,
                queryModel.timeField
            )

        return EntityQueryParams(filter=nodes, maxRecords=min(queryModel.recordLimit, MAX_RECORDS_PER_PAGE))

    @staticmethod
    def timeRangeNode(queryModel: QueryModel) -> FilterTree:
        return FilterTree.conjunction(
            FilterTree(op='gte', field=queryModel.timeField, value=queryModel.timeRange.startRFC3339),
            FilterTree(op='lte', field=queryModel.timeField, value=queryModel.timeRange.endRFC3339)
        )

    @staticmethod
    def _asTreeNodes(nodes: List[FilterNode]) -> List[FilterTree]:
        return [FilterTree.fromQueryFilter(node) if isinstance(node, QueryFilter) else node for node in nodes]
