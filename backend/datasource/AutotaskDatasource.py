"""
Datasource instance: answers panel queries, health checks and resource calls
for one configured Autotask account.
"""
import json
import logging
import threading
from typing import Any, Dict, Iterable, List, Optional

from autotask.AutotaskClient import AutotaskClient
from autotask.EntityService import EntityService
from autotask.pojos.ZoneInfo import ZoneInfo
from datasource.Constants import (
    HEALTH_ERROR_MESSAGE,
    HEALTH_OK_MESSAGE,
    LOG_PREFIX,
    PASSTHROUGH_STATUS_CODES,
    RESOURCE_QUERY,
    RESOURCE_QUERY_REF_ID,
    RESOURCE_TEST,
    RESOURCE_ZONE_INFO,
    TEST_SUCCESS_MESSAGE,
)
from datasource.enums.HealthStatus import HealthStatus
from datasource.enums.QueryType import QueryType
from datasource.FrameTranslator import FrameTranslator
from datasource.pojos.DataResponse import DataResponse
from datasource.pojos.DatasourceSettings import DatasourceSettings
from datasource.pojos.HealthCheckResult import HealthCheckResult
from datasource.pojos.QueryModel import QueryModel
from datasource.pojos.ResourceResponse import ResourceResponse
from datasource.pojos.TimeRange import TimeRange
from datasource.QueryBuilder import QueryBuilder
from framework.APIErrors import (
    CancellationError,
    DecodeError,
    HTTPError,
    NetworkError,
    RateLimitExceededError,
    RetryExhaustedError,
)

logger = logging.getLogger(__name__)


def statusForError(error: BaseException) -> int:
    """
    HTTP-like status for a failed query.

    400 for malformed queries, upstream 400/401/403/404/429 as-is, 502 for
    other upstream or transport failures, 504 for timeouts and cancellation,
    500 for anything else.
    """
    if isinstance(error, RetryExhaustedError):
        return statusForError(error.lastError)
    # FilterExpressionError and malformed query fields
    if isinstance(error, ValueError):
        return 400
    if isinstance(error, RateLimitExceededError):
        return 429
    if isinstance(error, HTTPError):
        return error.status if error.status in PASSTHROUGH_STATUS_CODES else 502
    if isinstance(error, CancellationError):
        return 504
    if isinstance(error, NetworkError):
        return 504 if error.timeout else 502
    if isinstance(error, DecodeError):
        return 502
    return 500


class AutotaskDatasource:
    """
    Owns one AutotaskClient. Instances are created and disposed by the
    InstanceRegistry, one per datasource uid.
    """

    def __init__(self, settings: DatasourceSettings, client: Optional[AutotaskClient] = None):
        self.settings = settings
        self.client = client or AutotaskClient(
            settings.username,
            settings.secret,
            settings.integrationCode,
            webservicesUrl=settings.url
        )
        logger.info(
            "%s :: Created datasource instance | UID: %s | User: %s | URL: %s",
            LOG_PREFIX,
            settings.uid,
            settings.username,
            settings.url
        )

    @classmethod
    def fromSettings(cls, settings: DatasourceSettings) -> 'AutotaskDatasource':
        return cls(settings)

    def _serviceFor(self, queryType: QueryType) -> EntityService:
        return {
            QueryType.TICKETS: self.client.tickets,
            QueryType.RESOURCES: self.client.resources,
            QueryType.COMPANIES: self.client.companies,
            QueryType.CONTACTS: self.client.contacts,
        }[queryType]

    def queryData(
        self,
        queries: Iterable[Dict[str, Any]],
        defaultTimeRange: Optional[TimeRange] = None,
        cancelEvent: Optional[threading.Event] = None
    ) -> Dict[str, DataResponse]:
        """
        Run each raw query independently; a failing query yields an error
        response under its refId and never affects the others.
        """
        responses: Dict[str, DataResponse] = {}
        for index, rawQuery in enumerate(queries):
            refId = rawQuery.get('refId') if isinstance(rawQuery, dict) else None
            refId = str(refId) if refId else str(index)
            responses[refId] = self.runQuery(rawQuery, refId, defaultTimeRange, cancelEvent)
        return responses

    def runQuery(
        self,
        rawQuery: Dict[str, Any],
        refId: str,
        defaultTimeRange: Optional[TimeRange] = None,
        cancelEvent: Optional[threading.Event] = None
    ) -> DataResponse:
        try:
            queryModel = QueryModel.fromDict(rawQuery, defaultTimeRange)
        except ValueError as e:
            logger.warning("%s :: Invalid query | RefId: %s | Error: %s", LOG_PREFIX, refId, str(e))
            return DataResponse.ofError(400, f"invalid query: {e}")
        queryModel.refId = refId

        try:
            return self.query(queryModel, cancelEvent)
        except Exception as e:
            status = statusForError(e)
            logger.error(
                "%s :: Query failed | RefId: %s | Type: %s | Status: %d | Error: %s",
                LOG_PREFIX,
                refId,
                queryModel.queryType.value,
                status,
                str(e),
                exc_info=status == 500
            )
            return DataResponse.ofError(status, f"failed to query {queryModel.queryType.value}: {e}")

    def query(self, queryModel: QueryModel, cancelEvent: Optional[threading.Event] = None) -> DataResponse:
        logger.debug(
            "%s :: Query | RefId: %s | Type: %s | Filter: %s",
            LOG_PREFIX,
            queryModel.refId,
            queryModel.queryType.value,
            queryModel.filter
        )
        params = QueryBuilder.buildParams(queryModel)
        entities: List = self._serviceFor(queryModel.queryType).queryAll(
            params,
            limit=queryModel.recordLimit,
            cancelEvent=cancelEvent
        )
        return DataResponse.ofFrames(FrameTranslator.toFrame(queryModel.queryType, entities))

    def getZoneInfo(self) -> ZoneInfo:
        return self.client.getZoneInfo()

    def checkHealth(self) -> HealthCheckResult:
        try:
            zoneInfo = self.getZoneInfo()
        except Exception as e:
            logger.warning("%s :: Health check failed | UID: %s | Error: %s", LOG_PREFIX, self.settings.uid, str(e))
            return HealthCheckResult(HealthStatus.ERROR, HEALTH_ERROR_MESSAGE.format(error=e))
        return HealthCheckResult(HealthStatus.OK, HEALTH_OK_MESSAGE.format(zoneName=zoneInfo.zoneName))

    @staticmethod
    def validateResourceCall(path: str, method: str) -> Optional[ResourceResponse]:
        """Reject unknown paths (404) and non-POST calls (405) before any instance is needed."""
        path = path.strip('/')
        if path not in (RESOURCE_ZONE_INFO, RESOURCE_QUERY, RESOURCE_TEST):
            return ResourceResponse(404, f"Unknown resource path: {path}")
        if method.upper() != 'POST':
            return ResourceResponse(405, "Method not allowed")
        return None

    def callResource(
        self,
        path: str,
        method: str,
        body: Any = None,
        cancelEvent: Optional[threading.Event] = None
    ) -> ResourceResponse:
        """
        Resource calls (POST only):
            zoneinfo -> the account's ZoneInfo
            query    -> frames for a single query taken from the body
            test     -> connection check
        """
        path = path.strip('/')
        rejection = self.validateResourceCall(path, method)
        if rejection is not None:
            return rejection

        if path == RESOURCE_ZONE_INFO:
            try:
                return ResourceResponse(200, self.getZoneInfo().toDict())
            except Exception as e:
                logger.error("%s :: Failed to get zone info | Error: %s", LOG_PREFIX, str(e))
                return ResourceResponse(500, f"Failed to get zone info: {e}")

        if path == RESOURCE_TEST:
            try:
                self.getZoneInfo()
            except Exception as e:
                return ResourceResponse(500, f"Failed to connect to Autotask API: {e}")
            return ResourceResponse(200, {'status': 'success', 'message': TEST_SUCCESS_MESSAGE})

        return self._resourceQuery(body, cancelEvent)

    def _resourceQuery(self, body: Any, cancelEvent: Optional[threading.Event]) -> ResourceResponse:
        if isinstance(body, (bytes, str)):
            try:
                body = json.loads(body or '{}')
            except ValueError as e:
                return ResourceResponse(400, f"Failed to execute query: invalid JSON: {e}")
        if not isinstance(body, dict):
            return ResourceResponse(400, "Failed to execute query: query must be an object")

        response = self.runQuery(body, RESOURCE_QUERY_REF_ID, cancelEvent=cancelEvent)
        if not response.success:
            return ResourceResponse(response.status, f"Failed to execute query: {response.error}")
        return ResourceResponse(200, [frame.toDict() for frame in response.frames])

    def dispose(self):
        logger.info("%s :: Disposing datasource instance | UID: %s", LOG_PREFIX, self.settings.uid)
        self.client.close()
