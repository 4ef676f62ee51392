"""
Centralized metrics collection for rate limiting and API requests.
"""
from prometheus_client import Counter, Histogram, Gauge


class RateLimitMetrics:
    """Centralized metrics collection for rate limiting and API requests."""

    # Request metrics
    apiRequestsTotal = Counter(
        'autotask_api_requests_total',
        'Total number of Autotask API requests',
        ['endpoint_type', 'status']
    )

    apiRequestDuration = Histogram(
        'autotask_api_request_duration_seconds',
        'Autotask API request duration in seconds',
        ['endpoint_type']
    )

    rateLimitRefusals = Counter(
        'autotask_rate_limit_refusals_total',
        'Number of requests refused by the client-side token bucket',
        ['endpoint_type']
    )

    retryAttempts = Counter(
        'autotask_retry_attempts_total',
        'Total number of retry attempts',
        ['endpoint_type', 'retry_number']
    )

    activeRequests = Gauge(
        'autotask_active_requests',
        'Number of in-flight requests per endpoint type',
        ['endpoint_type']
    )

    @classmethod
    def recordSuccess(cls, endpointType: str, duration: float):
        """Record a successful API request."""
        cls.apiRequestsTotal.labels(endpoint_type=endpointType, status='success').inc()
        cls.apiRequestDuration.labels(endpoint_type=endpointType).observe(duration)

    @classmethod
    def recordNotFound(cls, endpointType: str):
        """Record a 404 response."""
        cls.apiRequestsTotal.labels(endpoint_type=endpointType, status='not_found').inc()

    @classmethod
    def recordRateLimitHit(cls, endpointType: str):
        """Record a 429 from the server."""
        cls.apiRequestsTotal.labels(endpoint_type=endpointType, status='rate_limited').inc()

    @classmethod
    def recordRateLimitRefusal(cls, endpointType: str):
        """Record a request refused locally by the token bucket."""
        cls.rateLimitRefusals.labels(endpoint_type=endpointType).inc()

    @classmethod
    def recordServerError(cls, endpointType: str):
        cls.apiRequestsTotal.labels(endpoint_type=endpointType, status='server_error').inc()

    @classmethod
    def recordClientError(cls, endpointType: str):
        cls.apiRequestsTotal.labels(endpoint_type=endpointType, status='client_error').inc()

    @classmethod
    def recordError(cls, endpointType: str):
        """Record a transport error."""
        cls.apiRequestsTotal.labels(endpoint_type=endpointType, status='error').inc()

    @classmethod
    def recordRetry(cls, endpointType: str, retryNumber: int):
        cls.retryAttempts.labels(endpoint_type=endpointType, retry_number=str(retryNumber)).inc()

    @classmethod
    def incrementActiveRequests(cls, endpointType: str):
        cls.activeRequests.labels(endpoint_type=endpointType).inc()

    @classmethod
    def decrementActiveRequests(cls, endpointType: str):
        cls.activeRequests.labels(endpoint_type=endpointType).dec()
