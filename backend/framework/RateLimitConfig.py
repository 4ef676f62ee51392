"""
Centralized client configuration with environment variable support.
"""
import os


class RateLimitConfig:
    """Centralized rate limit, retry and HTTP configuration with environment variable support."""

    # Token bucket (default: burst of 60, one token per second afterwards)
    MAX_TOKENS = int(os.getenv('AUTOTASK_RATE_LIMIT_MAX_TOKENS', '60'))
    REFILL_RATE = int(os.getenv('AUTOTASK_RATE_LIMIT_REFILL_RATE', '1'))
    REFILL_PERIOD_SECONDS = float(os.getenv('AUTOTASK_RATE_LIMIT_REFILL_SECONDS', '1'))

    # Retry configuration
    MAX_RETRY_ATTEMPTS = int(os.getenv('MAX_RETRY_ATTEMPTS', '3'))
    RETRY_INITIAL_INTERVAL_SECONDS = float(os.getenv('RETRY_INITIAL_INTERVAL_SECONDS', '0.1'))
    RETRY_MAX_INTERVAL_SECONDS = float(os.getenv('RETRY_MAX_INTERVAL_SECONDS', '2'))
    RETRY_MULTIPLIER = float(os.getenv('RETRY_MULTIPLIER', '2.0'))
    RETRY_JITTER = float(os.getenv('RETRY_JITTER', '0.1'))

    # Connection pooling configuration
    POOL_CONNECTIONS = int(os.getenv('HTTP_POOL_CONNECTIONS', '10'))
    POOL_MAXSIZE = int(os.getenv('HTTP_POOL_MAXSIZE', '10'))
    POOL_BLOCK = os.getenv('HTTP_POOL_BLOCK', 'False').lower() == 'true'

    # Timeout configuration
    DEFAULT_TIMEOUT_SECONDS = int(os.getenv('DEFAULT_TIMEOUT_SECONDS', '60'))
