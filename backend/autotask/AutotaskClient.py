"""
Autotask REST API client.

Composes zone discovery, request construction with both authentication
schemes, a per-client token bucket, bounded retries and error mapping.
"""
import base64
import logging
import threading
from typing import Any, Dict, Optional
from urllib.parse import urljoin

import requests

from autotask.Constants import (
    DEFAULT_USER_AGENT,
    DEFAULT_WEBSERVICES_URL,
    LOG_PREFIX_CLIENT,
    ZONE_INFO_PATH,
)
from autotask.EntityService import EntityService
from autotask.enums.EntityName import EntityName
from autotask.pojos.Company import Company
from autotask.pojos.Contact import Contact
from autotask.pojos.Resource import Resource
from autotask.pojos.Ticket import Ticket
from autotask.pojos.ZoneInfo import ZoneInfo
from autotask.RequestLogger import RequestLogger
from autotask.WebhookService import WebhookService
from autotask.ZoneResolver import ZoneResolver
from framework.APIErrors import ConfigError, DecodeError, HTTPError
from framework.HTTPSessionManager import HTTPSessionManager
from framework.RateLimitConfig import RateLimitConfig
from framework.RateLimitedRequestHandler import RateLimitedRequestHandler
from framework.RetryPolicy import RetryConfig, withRetry
from framework.TokenBucketRateLimiter import TokenBucketRateLimiter

logger = logging.getLogger(__name__)


def parseErrorResponse(response: requests.Response) -> HTTPError:
    """
    Build an HTTPError from an Autotask error body.

    Autotask reports failures as {"errors": ["..."]} and occasionally {"Message": "..."}.
    """
    message = ""
    errors = []
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        message = str(payload.get('Message') or payload.get('message') or "")
        rawErrors = payload.get('errors') or []
        if isinstance(rawErrors, list):
            errors = [str(error) for error in rawErrors]
    elif response.text:
        message = response.text[:500]

    request = response.request
    return HTTPError(
        status=response.status_code,
        method=request.method if request is not None else "",
        url=request.url if request is not None else "",
        message=message,
        errors=errors
    )


class AutotaskClient:
    """
    Client for a single Autotask account.

    Each instance owns its session, token bucket and zone cache; instances
    never share rate limits.
    """

    def __init__(
        self,
        username: str,
        secret: str,
        integrationCode: str,
        webservicesUrl: str = DEFAULT_WEBSERVICES_URL,
        session: Optional[requests.Session] = None,
        limiter: Optional[TokenBucketRateLimiter] = None,
        retryConfig: Optional[RetryConfig] = None,
        timeout: float = RateLimitConfig.DEFAULT_TIMEOUT_SECONDS,
        userAgent: str = DEFAULT_USER_AGENT
    ):
        if not username:
            raise ConfigError("username")
        if not secret:
            raise ConfigError("secret")
        if not integrationCode:
            raise ConfigError("integrationCode", "integration code is required")

        self.username = username
        self.secret = secret
        self.integrationCode = integrationCode
        self.userAgent = userAgent
        self.retryConfig = retryConfig or RetryConfig.fromConfig()

        self.session = session or HTTPSessionManager.createSession()
        self.limiter = limiter or TokenBucketRateLimiter.fromConfig()
        self.requestHandler = RateLimitedRequestHandler(
            self.session,
            self.limiter,
            timeout=timeout,
            errorParser=parseErrorResponse
        )
        self.zoneResolver = ZoneResolver(
            self.session,
            username,
            self.authHeaders,
            discoveryUrl=(webservicesUrl or DEFAULT_WEBSERVICES_URL).rstrip('/') + ZONE_INFO_PATH,
            timeout=timeout,
            errorParser=parseErrorResponse
        )

        self.tickets: EntityService[Ticket] = EntityService(self, EntityName.TICKETS, Ticket)
        self.companies: EntityService[Company] = EntityService(self, EntityName.COMPANIES, Company)
        self.contacts: EntityService[Contact] = EntityService(self, EntityName.CONTACTS, Contact)
        self.resources: EntityService[Resource] = EntityService(self, EntityName.RESOURCES, Resource)
        self.webhooks = WebhookService(self)

    def authHeaders(self) -> Dict[str, str]:
        """Both authentication schemes are sent; Autotask accepts either."""
        credentials = base64.b64encode(f"{self.username}:{self.secret}".encode('utf-8')).decode('ascii')
        return {
            'User-Agent': self.userAgent,
            'Content-Type': 'application/json',
            'Accept': 'application/json',
            'Authorization': f"Basic {credentials}",
            'UserName': self.username,
            'Secret': self.secret,
            'ApiIntegrationCode': self.integrationCode,
        }

    def getZoneInfo(self) -> ZoneInfo:
        return self.zoneResolver.getZoneInfo()

    def newRequest(
        self,
        method: str,
        relativeUrl: str,
        body: Any = None,
        params: Optional[Dict[str, str]] = None
    ) -> requests.PreparedRequest:
        """
        Build an authenticated request against the account's regional base URL.

        Absolute URLs (pagination links) are used as given.
        """
        url = urljoin(self.zoneResolver.baseUrl(), relativeUrl)
        request = self.session.prepare_request(requests.Request(
            method,
            url,
            headers=self.authHeaders(),
            params=params,
            json=body
        ))
        RequestLogger.logRequest(request)
        return request

    def do(self, request: requests.PreparedRequest, raw: bool = False, endpointType: str = "general") -> Any:
        """
        Send a request through the token bucket.

        Returns:
            Raw body bytes when raw is True, else the decoded JSON (None for an empty body)
        """
        response = self.requestHandler.send(request, endpointType=endpointType)
        RequestLogger.logResponse(response)

        if raw:
            return response.content
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"failed to decode response from {request.url}: {e}") from e

    def execute(
        self,
        method: str,
        relativeUrl: str,
        body: Any = None,
        params: Optional[Dict[str, str]] = None,
        raw: bool = False,
        cancelEvent: Optional[threading.Event] = None,
        endpointType: str = "general"
    ) -> Any:
        """Build, send and decode a request with bounded retries."""
        return withRetry(
            cancelEvent,
            self.retryConfig,
            lambda: self.do(self.newRequest(method, relativeUrl, body, params), raw=raw, endpointType=endpointType),
            label=endpointType
        )

    def close(self):
        self.session.close()
        logger.info("%s :: Client closed | User: %s", LOG_PREFIX_CLIENT, self.username)
