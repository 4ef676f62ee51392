"""
Generic CRUD, query and pagination against one Autotask REST collection.
"""
import dataclasses
import logging
import threading
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, List, Optional, Type, TypeVar

from autotask.Constants import DEFAULT_MAX_RECORDS, LOG_PREFIX_ENTITY, MAX_RECORDS_PER_PAGE
from autotask.enums.EntityName import EntityName
from autotask.FilterExpressionParser import FilterExpressionParser
from autotask.pojos.AutotaskEntity import AutotaskEntity
from autotask.pojos.EntityQueryParams import EntityQueryParams
from autotask.pojos.PageDetails import PageDetails
from autotask.pojos.QueryResult import QueryResult
from framework.APIErrors import APIError, DecodeError, HTTPError

if TYPE_CHECKING:
    from autotask.AutotaskClient import AutotaskClient

logger = logging.getLogger(__name__)

E = TypeVar('E', bound=AutotaskEntity)
R = TypeVar('R')


class EntityService(Generic[E]):
    """
    Operations on `{collection}` endpoints, decoding payloads into `entityType`.

    Every failure from the client belt is re-raised with the collection and
    operation prefixed to its message; the error type is unchanged.
    """

    def __init__(self, client: 'AutotaskClient', entityName: EntityName, entityType: Type[E]):
        self.client = client
        self.entityName = entityName
        self.entityType = entityType

    @property
    def collection(self) -> str:
        return self.entityName.value

    @property
    def endpointType(self) -> str:
        return self.entityName.value.lower()

    def get(self, entityId: int, cancelEvent: Optional[threading.Event] = None) -> E:
        path = f"{self.collection}/{entityId}"

        def operation() -> E:
            payload = self._execute('GET', path, cancelEvent=cancelEvent)
            item = self._unwrapItem(payload)
            if item is None:
                raise HTTPError(404, 'GET', path, f"{self.collection} {entityId} not found")
            return self.entityType.fromAPIResponse(item)

        return self._withContext('get', operation)

    def query(
        self,
        filterExpression: str,
        cancelEvent: Optional[threading.Event] = None,
        maxRecords: int = DEFAULT_MAX_RECORDS
    ) -> QueryResult[E]:
        """
        Query with the `field=value` shorthand (or filter-tree JSON).

        An empty expression applies the collection's default filter.
        """
        params = FilterExpressionParser.toQueryParams(self.entityName, filterExpression, maxRecords)
        return self.queryWithParams(params, cancelEvent=cancelEvent)

    def queryWithParams(
        self,
        params: EntityQueryParams,
        cancelEvent: Optional[threading.Event] = None
    ) -> QueryResult[E]:
        def operation() -> QueryResult[E]:
            payload = self._execute(
                'GET',
                f"{self.collection}/query",
                params={'search': params.toSearchJSON()},
                cancelEvent=cancelEvent
            )
            return self._decodeList(payload)

        return self._withContext('query', operation)

    def queryAll(
        self,
        params: EntityQueryParams,
        limit: Optional[int] = None,
        cancelEvent: Optional[threading.Event] = None
    ) -> List[E]:
        """
        Query and follow nextPageUrl until `limit` items are collected or pages run out.
        """
        if limit is not None and limit > 0:
            params = dataclasses.replace(params, maxRecords=min(limit, MAX_RECORDS_PER_PAGE))

        result = self.queryWithParams(params, cancelEvent=cancelEvent)
        items = list(result.items)
        pageCount = 1

        while result.hasNextPage and (limit is None or len(items) < limit):
            result = self._fetchPage(result.pageDetails.nextPageUrl, 'next page', cancelEvent)
            items.extend(result.items)
            pageCount += 1

        logger.info(
            "%s :: Query complete | Entity: %s | Items: %d | Pages: %d",
            LOG_PREFIX_ENTITY,
            self.collection,
            len(items),
            pageCount
        )

        if limit is not None and limit > 0:
            return items[:limit]
        return items

    def count(self, filterExpression: str, cancelEvent: Optional[threading.Event] = None) -> int:
        params = FilterExpressionParser.toQueryParams(self.entityName, filterExpression)

        def operation() -> int:
            payload = self._execute(
                'GET',
                f"{self.collection}/query/count",
                params={'search': params.toSearchJSON()},
                cancelEvent=cancelEvent
            )
            if not isinstance(payload, dict) or ('count' not in payload and 'queryCount' not in payload):
                raise DecodeError(f"count response has no count: {payload!r}")
            return int(payload.get('count', payload.get('queryCount')))

        return self._withContext('count', operation)

    def create(self, entity: E, cancelEvent: Optional[threading.Event] = None) -> E:
        def operation() -> E:
            payload = self._execute('POST', self.collection, body=entity.toAPIPayload(), cancelEvent=cancelEvent)
            return self._decodeSaved(payload, entity)

        return self._withContext('create', operation)

    def update(self, entityId: int, entity: E, cancelEvent: Optional[threading.Event] = None) -> E:
        def operation() -> E:
            payload = self._execute(
                'PATCH',
                f"{self.collection}/{entityId}",
                body=entity.toAPIPayload(),
                cancelEvent=cancelEvent
            )
            return self._decodeSaved(payload, entity)

        return self._withContext('update', operation)

    def delete(self, entityId: int, cancelEvent: Optional[threading.Event] = None):
        self._withContext(
            'delete',
            lambda: self._execute('DELETE', f"{self.collection}/{entityId}", cancelEvent=cancelEvent)
        )

    def batchCreate(self, entities: Iterable[E], cancelEvent: Optional[threading.Event] = None) -> List[E]:
        return self._batch('POST', 'batch create', [entity.toAPIPayload() for entity in entities], cancelEvent)

    def batchUpdate(self, entities: Iterable[E], cancelEvent: Optional[threading.Event] = None) -> List[E]:
        return self._batch('PATCH', 'batch update', [entity.toAPIPayload() for entity in entities], cancelEvent)

    def batchDelete(self, entityIds: Iterable[int], cancelEvent: Optional[threading.Event] = None):
        self._batch('DELETE', 'batch delete', list(entityIds), cancelEvent)

    def getNextPage(self, pageDetails: PageDetails, cancelEvent: Optional[threading.Event] = None) -> List[E]:
        if not pageDetails.nextPageUrl:
            return []
        return self._fetchPage(pageDetails.nextPageUrl, 'next page', cancelEvent).items

    def getPreviousPage(self, pageDetails: PageDetails, cancelEvent: Optional[threading.Event] = None) -> List[E]:
        if not pageDetails.prevPageUrl:
            return []
        return self._fetchPage(pageDetails.prevPageUrl, 'previous page', cancelEvent).items

    def _fetchPage(self, url: str, operationName: str, cancelEvent: Optional[threading.Event]) -> QueryResult[E]:
        # Page URLs are absolute and already carry the search parameter
        return self._withContext(
            operationName,
            lambda: self._decodeList(self._execute('GET', url, cancelEvent=cancelEvent))
        )

    def _batch(self, method: str, operationName: str, body: list, cancelEvent: Optional[threading.Event]) -> List[E]:
        def operation() -> List[E]:
            payload = self._execute(method, f"{self.collection}/batch", body=body, cancelEvent=cancelEvent)
            if isinstance(payload, dict) and isinstance(payload.get('items'), list):
                return [self.entityType.fromAPIResponse(item) for item in payload['items']]
            return []

        return self._withContext(operationName, operation)

    def _execute(self, method: str, path: str, **kwargs) -> Any:
        return self.client.execute(method, path, endpointType=self.endpointType, **kwargs)

    def _withContext(self, operationName: str, operation: Callable[[], R]) -> R:
        try:
            return operation()
        except APIError as e:
            logger.error(
                "%s :: Operation failed | Entity: %s | Op: %s | Error: %s",
                LOG_PREFIX_ENTITY,
                self.collection,
                operationName,
                str(e)
            )
            raise e.withContext(self.collection, operationName)

    def _unwrapItem(self, payload: Any) -> Optional[dict]:
        if not isinstance(payload, dict) or 'item' not in payload:
            raise DecodeError(f"expected an item envelope from {self.collection}: {payload!r}")
        return payload['item']

    def _decodeList(self, payload: Any) -> QueryResult[E]:
        if not isinstance(payload, dict) or not isinstance(payload.get('items'), list):
            raise DecodeError(f"expected an items envelope from {self.collection}: {payload!r}")
        return QueryResult(
            items=[self.entityType.fromAPIResponse(item) for item in payload['items']],
            pageDetails=PageDetails.fromAPIResponse(payload.get('pageDetails'))
        )

    def _decodeSaved(self, payload: Any, entity: E) -> E:
        # Autotask answers writes with either the saved item or just its id
        if isinstance(payload, dict) and payload.get('item') is not None:
            return self.entityType.fromAPIResponse(payload['item'])
        if isinstance(payload, dict) and 'itemId' in payload:
            return dataclasses.replace(entity, id=int(payload['itemId']))
        raise DecodeError(f"unexpected save response from {self.collection}: {payload!r}")
