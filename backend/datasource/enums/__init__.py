from datasource.enums.HealthStatus import HealthStatus
from datasource.enums.QueryType import QueryType

__all__ = ['HealthStatus', 'QueryType']
