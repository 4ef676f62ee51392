# ===============================================================================
# PYTEST CONFIGURATION FOR THE AUTOTASK DATASOURCE
# ===============================================================================
"""
Global test configuration.

Test Structure:
- tests/unit/<package>/ mirrors backend/<package>/
- Naming convention: test_{module}.py

Autotask is never contacted: `requests.Session.send` is patched to route
prepared requests to a FakeAutotask that answers with real
`requests.Response` objects and records every request it saw.
"""

import json
import os
import threading
import time
from typing import List
from urllib.parse import urlsplit

import django


def pytest_configure():
    """Configure Django settings for pytest"""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

    # Configure Django
    django.setup()


# ===============================================================================
# FAKE AUTOTASK API
# ===============================================================================

import pytest  # noqa: E402
import requests  # noqa: E402

from autotask.AutotaskClient import AutotaskClient  # noqa: E402
from framework.RetryPolicy import RetryConfig  # noqa: E402
from framework.TokenBucketRateLimiter import TokenBucketRateLimiter  # noqa: E402

USERNAME = 'api@example.com'
SECRET = 's3cret'
INTEGRATION_CODE = 'INTEGRATION-CODE'

ZONE_INFO = {
    'zoneName': 'Zone 2',
    'url': 'https://webservices2.autotask.net/ATServicesRest/',
    'webUrl': 'https://ww2.autotask.net/',
    'ci': 2,
}

BASE_URL = 'https://webservices2.autotask.net/atservicesrest/v1.0/'


class FakeAutotask:
    """
    Routes requests by method and URL path suffix.

    Each route holds a list of outcomes, either (status, payload) tuples or
    exceptions to raise. Outcomes are consumed in order and the last one
    repeats. Routes registered later take precedence.
    """

    def __init__(self):
        self.requests: List[requests.PreparedRequest] = []
        self.delay = 0.0
        self._lock = threading.Lock()
        self._routes = []
        self.on('GET', 'ZoneInformation', (200, ZONE_INFO))

    def on(self, method: str, pathSuffix: str, *outcomes):
        self._routes.insert(0, (method, pathSuffix, list(outcomes)))

    @property
    def discoveryRequests(self) -> List[requests.PreparedRequest]:
        return [request for request in self.requests if 'ZoneInformation' in request.url]

    @property
    def apiRequests(self) -> List[requests.PreparedRequest]:
        return [request for request in self.requests if 'ZoneInformation' not in request.url]

    def send(self, request: requests.PreparedRequest, **kwargs) -> requests.Response:
        with self._lock:
            self.requests.append(request)
        if self.delay:
            time.sleep(self.delay)

        path = urlsplit(request.url).path
        for method, pathSuffix, outcomes in self._routes:
            if method == request.method and path.endswith(pathSuffix):
                with self._lock:
                    outcome = outcomes.pop(0) if len(outcomes) > 1 else outcomes[0]
                if isinstance(outcome, Exception):
                    raise outcome
                status, payload = outcome
                return buildResponse(request, status, payload)

        return buildResponse(request, 404, {'errors': [f'no route for {request.method} {path}']})


def buildResponse(request: requests.PreparedRequest, status: int, payload=None) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.request = request
    response.url = request.url
    if payload is None:
        response._content = b''
    elif isinstance(payload, (bytes, str)):
        response._content = payload.encode('utf-8') if isinstance(payload, str) else payload
    else:
        response._content = json.dumps(payload).encode('utf-8')
        response.headers['Content-Type'] = 'application/json; charset=utf-8'
    return response


# ===============================================================================
# PYTEST FIXTURES
# ===============================================================================

@pytest.fixture
def fakeAutotask():
    return FakeAutotask()


@pytest.fixture
def autotaskSession(mocker, fakeAutotask):
    session = requests.Session()
    mocker.patch.object(session, 'send', side_effect=fakeAutotask.send)
    return session


@pytest.fixture
def fastRetryConfig():
    return RetryConfig(maxRetries=3, initialInterval=0.001, maxInterval=0.002, multiplier=2.0, jitterFraction=0.0)


@pytest.fixture
def makeClient(autotaskSession, fastRetryConfig):
    """Factory for clients wired to the fake API; keyword arguments override the defaults."""
    def factory(**overrides) -> AutotaskClient:
        options = {
            'session': autotaskSession,
            'limiter': TokenBucketRateLimiter(maxTokens=1000, refillRate=1000, refillPeriod=1.0),
            'retryConfig': fastRetryConfig,
        }
        options.update(overrides)
        return AutotaskClient(USERNAME, SECRET, INTEGRATION_CODE, **options)
    return factory


@pytest.fixture
def autotaskClient(makeClient):
    return makeClient()


@pytest.fixture
def instanceSettings():
    return {
        'uid': 'autotask-prod',
        'url': '',
        'updated': '2024-05-01T10:00:00Z',
        'jsonData': {'username': USERNAME, 'url': 'https://webservices.autotask.net'},
        'decryptedSecureJsonData': {'secret': SECRET, 'integrationCode': INTEGRATION_CODE},
    }
