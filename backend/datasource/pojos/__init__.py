"""
POJOs for the datasource app.
"""

from .DataFrame import DataFrame, Field
from .DataResponse import DataResponse
from .DatasourceSettings import DatasourceSettings
from .HealthCheckResult import HealthCheckResult
from .QueryModel import QueryModel
from .ResourceResponse import ResourceResponse
from .TimeRange import TimeRange

__all__ = [
    'DataFrame',
    'DataResponse',
    'DatasourceSettings',
    'Field',
    'HealthCheckResult',
    'QueryModel',
    'ResourceResponse',
    'TimeRange',
]
