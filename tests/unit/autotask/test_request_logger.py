"""
Tests for credential redaction in request logging.
"""
import logging

from autotask.RequestLogger import REDACTED, RequestLogger


class TestRedactHeaders:

    def test_credentials_are_redacted(self):
        headers = {
            'Authorization': 'Basic abc',
            'Secret': 's3cret',
            'UserName': 'api@example.com',
            'ApiIntegrationCode': 'INTEGRATION-CODE',
        }

        redacted = RequestLogger.redactHeaders(headers)

        assert redacted['Authorization'] == REDACTED
        assert redacted['Secret'] == REDACTED
        assert redacted['UserName'] == 'api@example.com'
        assert redacted['ApiIntegrationCode'] == 'INTEGRATION-CODE'

    def test_match_is_case_insensitive(self):
        assert RequestLogger.redactHeaders({'secret': 'x'}) == {'secret': REDACTED}

    def test_empty(self):
        assert RequestLogger.redactHeaders(None) == {}


class TestLogRequest:

    def test_debug_log_never_contains_secret(self, autotaskClient, mocker):
        logger = mocker.patch('autotask.RequestLogger.logger')
        logger.isEnabledFor.return_value = True

        autotaskClient.newRequest('GET', 'Tickets/1')

        for call in logger.debug.call_args_list:
            assert 's3cret' not in repr(call)
        assert logger.debug.called

    def test_skipped_when_debug_disabled(self, autotaskClient, mocker):
        logger = mocker.patch('autotask.RequestLogger.logger')
        logger.isEnabledFor.return_value = False

        autotaskClient.newRequest('GET', 'Tickets/1')

        logger.isEnabledFor.assert_called_with(logging.DEBUG)
        logger.debug.assert_not_called()
