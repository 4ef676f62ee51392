"""
Factory for HTTP sessions with connection pooling.
"""
import logging
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from framework.RateLimitConfig import RateLimitConfig

logger = logging.getLogger(__name__)


class HTTPSessionManager:
    """
    Creates pooled requests sessions.
    Each API client owns its session so instances never share connections or limits.
    """

    @classmethod
    def createSession(cls) -> requests.Session:
        """
        Create a new session with connection pooling.

        Returns:
            Configured requests.Session instance
        """
        session = requests.Session()

        adapter = HTTPAdapter(
            pool_connections=RateLimitConfig.POOL_CONNECTIONS,
            pool_maxsize=RateLimitConfig.POOL_MAXSIZE,
            pool_block=RateLimitConfig.POOL_BLOCK,
            max_retries=Retry(
                total=None,
                connect=3,
                read=0,
                status=0,  # Status retries are handled by RetryPolicy
                redirect=5,
                raise_on_status=False
            )
        )

        session.mount('http://', adapter)
        session.mount('https://', adapter)

        logger.info(
            "HTTP_SESSION :: Created HTTP session | Pool: %d connections | Max: %d",
            RateLimitConfig.POOL_CONNECTIONS,
            RateLimitConfig.POOL_MAXSIZE
        )

        return session
