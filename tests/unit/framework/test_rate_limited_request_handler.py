"""
Tests for sending requests through the token bucket.
"""
import pytest
import requests

from framework.APIErrors import HTTPError, NetworkError, RateLimitExceededError
from framework.RateLimitedRequestHandler import RateLimitedRequestHandler


def prepared(url: str = 'https://api.example.test/v1.0/Tickets/1') -> requests.PreparedRequest:
    return requests.Request('GET', url).prepare()


def response(request: requests.PreparedRequest, status: int, body: bytes = b'{}') -> requests.Response:
    result = requests.Response()
    result.status_code = status
    result.request = request
    result._content = body
    return result


@pytest.fixture
def session(mocker):
    return mocker.Mock(spec=requests.Session)


@pytest.fixture
def limiter(mocker):
    limiter = mocker.Mock()
    limiter.acquire.return_value = True
    return limiter


class TestRateLimitedRequestHandler:

    def test_returns_successful_response(self, session, limiter):
        request = prepared()
        session.send.return_value = response(request, 200)
        handler = RateLimitedRequestHandler(session, limiter, timeout=5)

        result = handler.send(request, endpointType='tickets')

        assert result.status_code == 200
        session.send.assert_called_once_with(request, timeout=5)

    def test_refusal_raises_without_sending(self, session, limiter):
        limiter.acquire.return_value = False
        handler = RateLimitedRequestHandler(session, limiter)

        with pytest.raises(RateLimitExceededError) as excinfo:
            handler.send(prepared())

        assert excinfo.value.retryable
        session.send.assert_not_called()

    def test_non_2xx_is_mapped_by_error_parser(self, session, limiter):
        request = prepared()
        session.send.return_value = response(request, 503, b'unavailable')
        handler = RateLimitedRequestHandler(session, limiter)

        with pytest.raises(HTTPError) as excinfo:
            handler.send(request)

        assert excinfo.value.status == 503
        assert excinfo.value.method == 'GET'
        assert excinfo.value.message == 'unavailable'

    def test_timeout_becomes_network_error(self, session, limiter):
        session.send.side_effect = requests.exceptions.ReadTimeout("slow")
        handler = RateLimitedRequestHandler(session, limiter)

        with pytest.raises(NetworkError) as excinfo:
            handler.send(prepared())

        assert excinfo.value.timeout is True

    def test_connection_failure_becomes_network_error(self, session, limiter):
        session.send.side_effect = requests.exceptions.ConnectionError("refused")
        handler = RateLimitedRequestHandler(session, limiter)

        with pytest.raises(NetworkError) as excinfo:
            handler.send(prepared())

        assert excinfo.value.timeout is False
        assert "refused" in str(excinfo.value)
