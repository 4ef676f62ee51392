"""
Handler for sending rate-limited HTTP requests and classifying their responses.
"""
import logging
import time
from typing import Callable, Optional

import requests

from framework.APIErrors import HTTPError, NetworkError, RateLimitExceededError
from framework.RateLimitConfig import RateLimitConfig
from framework.RateLimitMetrics import RateLimitMetrics
from framework.TokenBucketRateLimiter import TokenBucketRateLimiter

logger = logging.getLogger(__name__)

ErrorParser = Callable[[requests.Response], HTTPError]


def defaultErrorParser(response: requests.Response) -> HTTPError:
    request = response.request
    return HTTPError(
        status=response.status_code,
        method=request.method if request is not None else "",
        url=request.url if request is not None else "",
        message=response.text[:500]
    )


class RateLimitedRequestHandler:
    """
    Sends prepared requests through a pooled session after taking a token
    from the caller's bucket. Never retries; retries belong to RetryPolicy.
    """

    def __init__(
        self,
        session: requests.Session,
        limiter: TokenBucketRateLimiter,
        timeout: float = RateLimitConfig.DEFAULT_TIMEOUT_SECONDS,
        errorParser: Optional[ErrorParser] = None
    ):
        self.session = session
        self.limiter = limiter
        self.timeout = timeout
        self.errorParser = errorParser or defaultErrorParser

    def send(self, request: requests.PreparedRequest, endpointType: str = "general") -> requests.Response:
        """
        Send a prepared request.

        Raises:
            RateLimitExceededError: the token bucket is empty (retryable)
            NetworkError: transport failure
            HTTPError: non-2xx response
        """
        if not self.limiter.acquire():
            RateLimitMetrics.recordRateLimitRefusal(endpointType)
            logger.warning(
                "RATE_LIMITER :: Token bucket empty | Type: %s | URL: %s",
                endpointType,
                request.url
            )
            raise RateLimitExceededError()

        startTime = time.time()
        RateLimitMetrics.incrementActiveRequests(endpointType)
        try:
            response = self.session.send(request, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            RateLimitMetrics.recordError(endpointType)
            raise NetworkError(f"request timed out: {e}", timeout=True) from e
        except requests.exceptions.RequestException as e:
            RateLimitMetrics.recordError(endpointType)
            logger.error(
                "RATE_LIMITER :: Request failed | Type: %s | URL: %s | Error: %s",
                endpointType,
                request.url,
                str(e)
            )
            raise NetworkError(f"failed to execute request: {e}") from e
        finally:
            RateLimitMetrics.decrementActiveRequests(endpointType)

        return self._handleResponse(response, endpointType, time.time() - startTime)

    def _handleResponse(self, response: requests.Response, endpointType: str, duration: float) -> requests.Response:
        status = response.status_code

        if 200 <= status < 300:
            RateLimitMetrics.recordSuccess(endpointType, duration)
            return response

        if status == 404:
            RateLimitMetrics.recordNotFound(endpointType)
        elif status == 429:
            RateLimitMetrics.recordRateLimitHit(endpointType)
            logger.warning("RATE_LIMITER :: Server rate limit hit | Type: %s", endpointType)
        elif 500 <= status < 600:
            RateLimitMetrics.recordServerError(endpointType)
            logger.warning("RATE_LIMITER :: Server error | Status: %d | Type: %s", status, endpointType)
        else:
            RateLimitMetrics.recordClientError(endpointType)
            logger.error("RATE_LIMITER :: Client error | Status: %d | Type: %s", status, endpointType)

        raise self.errorParser(response)
