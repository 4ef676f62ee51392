import logging

from django.apps import apps
from django.http import HttpResponse
from django.views.decorators.http import require_GET
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from datasource.AutotaskDatasource import AutotaskDatasource
from datasource.Constants import INSTANCE_ERROR_MESSAGE, LOG_PREFIX, QUERY_TIMEOUT_SECONDS
from datasource.enums.HealthStatus import HealthStatus
from datasource.pojos.DatasourceSettings import DatasourceSettings
from datasource.pojos.HealthCheckResult import HealthCheckResult
from datasource.pojos.ResourceResponse import ResourceResponse
from datasource.pojos.TimeRange import TimeRange
from datasource.utils.Deadline import cancelAfter
from framework.APIErrors import ConfigError

logger = logging.getLogger(__name__)

RESOURCE_METHODS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE']


def _getInstance(request) -> AutotaskDatasource:
    pluginContext = request.data.get('pluginContext') if isinstance(request.data, dict) else None
    settings = DatasourceSettings.fromPluginContext(pluginContext)
    return apps.get_app_config('datasource').registry.get(settings)


def _resourceHttpResponse(result: ResourceResponse):
    if result.isJSON:
        return Response(result.body, status=result.status)
    return HttpResponse(str(result.body), status=result.status, content_type='text/plain; charset=utf-8')


@api_view(['POST'])
def queryData(request):
    """
    Run a batch of panel queries.

    POST /api/datasource/query

    Returns:
        - 200: {"results": {refId: {"status", "frames"} | {"status", "error"}}}
        - 400: invalid plugin context or request body
    """
    try:
        instance = _getInstance(request)
    except ConfigError as e:
        logger.warning("%s :: Invalid plugin context | Error: %s", LOG_PREFIX, str(e))
        return Response({'error': INSTANCE_ERROR_MESSAGE.format(error=e)}, status=status.HTTP_400_BAD_REQUEST)

    queries = request.data.get('queries')
    if not isinstance(queries, list):
        return Response({'error': 'queries must be a list'}, status=status.HTTP_400_BAD_REQUEST)

    try:
        defaultTimeRange = TimeRange.fromDict(request.data.get('range'))
    except ValueError as e:
        return Response({'error': f"invalid range: {e}"}, status=status.HTTP_400_BAD_REQUEST)

    with cancelAfter(QUERY_TIMEOUT_SECONDS) as cancelEvent:
        responses = instance.queryData(queries, defaultTimeRange, cancelEvent)

    return Response(
        {'results': {refId: response.toDict() for refId, response in responses.items()}},
        status=status.HTTP_200_OK
    )


@api_view(['POST'])
def checkHealth(request):
    """
    POST /api/datasource/health

    Always answers 200; the outcome is in the body's status field.
    """
    try:
        instance = _getInstance(request)
    except ConfigError as e:
        result = HealthCheckResult(HealthStatus.ERROR, INSTANCE_ERROR_MESSAGE.format(error=e))
        return Response(result.toDict(), status=status.HTTP_200_OK)

    result = instance.checkHealth()
    logger.info("%s :: Health check | Status: %s | Message: %s", LOG_PREFIX, result.status.value, result.message)
    return Response(result.toDict(), status=status.HTTP_200_OK)


@api_view(RESOURCE_METHODS)
def callResource(request, path):
    rejection = AutotaskDatasource.validateResourceCall(path, request.method)
    if rejection is not None:
        return _resourceHttpResponse(rejection)

    try:
        instance = _getInstance(request)
    except ConfigError as e:
        return _resourceHttpResponse(ResourceResponse(500, INSTANCE_ERROR_MESSAGE.format(error=e)))

    data = request.data if isinstance(request.data, dict) else {}
    body = {key: value for key, value in data.items() if key != 'pluginContext'}
    with cancelAfter(QUERY_TIMEOUT_SECONDS) as cancelEvent:
        result = instance.callResource(path, request.method, body, cancelEvent)
    return _resourceHttpResponse(result)


@require_GET
def metrics(request):
    return HttpResponse(generate_latest(), content_type=CONTENT_TYPE_LATEST)
