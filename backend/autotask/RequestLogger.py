"""
Debug-level logging of Autotask HTTP traffic with credentials redacted.
"""
import logging
from typing import Mapping, Optional

import requests

logger = logging.getLogger(__name__)

REDACTED = "[REDACTED]"
REDACTED_HEADERS = frozenset({'secret', 'authorization'})
MAX_BODY_LOG_LENGTH = 2000


class RequestLogger:

    @staticmethod
    def redactHeaders(headers: Optional[Mapping[str, str]]) -> dict:
        if not headers:
            return {}
        return {
            key: (REDACTED if key.lower() in REDACTED_HEADERS else value)
            for key, value in headers.items()
        }

    @classmethod
    def logRequest(cls, request: requests.PreparedRequest):
        if not logger.isEnabledFor(logging.DEBUG):
            return
        logger.debug(
            "AUTOTASK_HTTP :: Request | Method: %s | URL: %s | Headers: %s",
            request.method,
            request.url,
            cls.redactHeaders(request.headers)
        )

    @classmethod
    def logResponse(cls, response: requests.Response):
        if not logger.isEnabledFor(logging.DEBUG):
            return
        body = response.text or ""
        if len(body) > MAX_BODY_LOG_LENGTH:
            body = body[:MAX_BODY_LOG_LENGTH] + "..."
        logger.debug(
            "AUTOTASK_HTTP :: Response | Status: %d | Headers: %s | Body: %s",
            response.status_code,
            dict(response.headers),
            body
        )
