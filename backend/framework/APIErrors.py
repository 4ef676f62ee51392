"""
Error taxonomy for outbound API calls and the retry classification built on it.
"""
from typing import List, Optional

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


class APIError(Exception):
    """Base class for every error raised by the API client belt."""

    retryable = False

    def withContext(self, entityName: str, operation: str) -> 'APIError':
        """Prefix the message with the entity and operation, keeping the error type."""
        self.args = (f"{entityName} {operation}: {self}",) + self.args[1:]
        return self


class ConfigError(APIError, ValueError):
    """A required configuration field is missing or invalid."""

    def __init__(self, fieldName: str, message: Optional[str] = None):
        self.fieldName = fieldName
        super().__init__(message or f"{fieldName} is required")


class NetworkError(APIError):
    """Transport failure: connection refused, DNS, TLS, timeouts."""

    def __init__(self, message: str, timeout: bool = False):
        self.timeout = timeout
        super().__init__(message)


class HTTPError(APIError):
    """Non-2xx response from the API."""

    def __init__(
        self,
        status: int,
        method: str,
        url: str,
        message: str = "",
        errors: Optional[List[str]] = None
    ):
        self.status = status
        self.method = method
        self.url = url
        self.message = message
        self.errors = errors or []
        detail = self.errors[0] if self.errors else self.message
        super().__init__(f"{method} {url}: {status} {detail}".rstrip())


class DecodeError(APIError):
    """Response body was not the JSON shape we expected."""


class CancellationError(APIError):
    """The caller's cancellation signal fired."""


class RetryableError(APIError):
    """Wraps any error the caller explicitly marks as safe to retry."""

    retryable = True

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"retryable error: {cause}")


class RateLimitExceededError(APIError):
    """The client-side token bucket refused the request."""

    retryable = True

    def __init__(self, message: str = "client rate limit exceeded"):
        super().__init__(message)


class RetryExhaustedError(APIError):
    """Every attempt failed with a retryable error."""

    def __init__(self, lastError: Exception, attempts: int):
        self.lastError = lastError
        self.attempts = attempts
        super().__init__(f"max retries exceeded after {attempts} attempts: {lastError}")


def isRetryable(error: Optional[BaseException]) -> bool:
    """
    An error is retryable iff it is explicitly tagged retryable or it is an
    HTTPError whose status is 429 or one of the transient 5xx codes.
    """
    if error is None:
        return False
    if isinstance(error, HTTPError):
        return error.status in RETRYABLE_STATUS_CODES
    return bool(getattr(error, 'retryable', False))
