"""
Discovers and caches the regional API base URL for an Autotask account.
"""
import logging
import threading
from typing import Callable, Dict, Optional

import requests

from autotask.Constants import API_VERSION, BASE_ZONE_INFO_URL, LOG_PREFIX_ZONE, ZONE_PATH_SEGMENT
from autotask.pojos.ZoneInfo import ZoneInfo
from autotask.RequestLogger import RequestLogger
from framework.APIErrors import DecodeError, HTTPError, NetworkError
from framework.RateLimitConfig import RateLimitConfig
from framework.RateLimitedRequestHandler import defaultErrorParser

logger = logging.getLogger(__name__)


class ZoneResolver:
    """
    One-shot cache of the account's zone.

    The first caller performs discovery while holding the lock; concurrent
    first callers wait on the lock and then see the cached value, so exactly
    one discovery request is made. invalidate() forces the next caller to
    rediscover.
    """

    def __init__(
        self,
        session: requests.Session,
        username: str,
        headersFactory: Callable[[], Dict[str, str]],
        discoveryUrl: str = BASE_ZONE_INFO_URL,
        timeout: float = RateLimitConfig.DEFAULT_TIMEOUT_SECONDS,
        errorParser: Callable[[requests.Response], HTTPError] = defaultErrorParser
    ):
        self.session = session
        self.username = username
        self.headersFactory = headersFactory
        self.discoveryUrl = discoveryUrl
        self.timeout = timeout
        self.errorParser = errorParser
        self._lock = threading.Lock()
        self._zoneInfo: Optional[ZoneInfo] = None

    @staticmethod
    def deriveBaseUrl(zoneUrl: str) -> str:
        """
        https://webservices2.autotask.net/ATServicesRest/ -> https://webservices2.autotask.net/atservicesrest/v1.0/
        """
        baseUrl = zoneUrl.replace(ZONE_PATH_SEGMENT, ZONE_PATH_SEGMENT.lower(), 1)
        if not baseUrl.endswith('/'):
            baseUrl += '/'
        return f"{baseUrl}{API_VERSION}/"

    def getZoneInfo(self) -> ZoneInfo:
        zoneInfo = self._zoneInfo
        if zoneInfo is not None:
            return zoneInfo

        with self._lock:
            if self._zoneInfo is None:
                zoneInfo = self._discover()
                self._zoneInfo = zoneInfo
                logger.info(
                    "%s :: Zone resolved | Zone: %s | Base URL: %s",
                    LOG_PREFIX_ZONE,
                    zoneInfo.zoneName,
                    self.deriveBaseUrl(zoneInfo.url)
                )
            return self._zoneInfo

    def baseUrl(self) -> str:
        return self.deriveBaseUrl(self.getZoneInfo().url)

    def invalidate(self):
        with self._lock:
            self._zoneInfo = None
        logger.info("%s :: Zone cache invalidated | User: %s", LOG_PREFIX_ZONE, self.username)

    def _discover(self) -> ZoneInfo:
        request = self.session.prepare_request(requests.Request(
            'GET',
            self.discoveryUrl,
            params={'user': self.username},
            headers=self.headersFactory()
        ))
        RequestLogger.logRequest(request)

        try:
            response = self.session.send(request, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise NetworkError(f"zone discovery timed out: {e}", timeout=True) from e
        except requests.exceptions.RequestException as e:
            logger.error("%s :: Zone discovery failed | User: %s | Error: %s", LOG_PREFIX_ZONE, self.username, str(e))
            raise NetworkError(f"zone discovery failed: {e}") from e

        RequestLogger.logResponse(response)
        if response.status_code != 200:
            raise self.errorParser(response)

        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeError(f"failed to decode zone information: {e}") from e
        return ZoneInfo.fromAPIResponse(payload)
