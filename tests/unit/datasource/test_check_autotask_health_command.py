"""
Tests for the CheckAutotaskHealth management command.
"""
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from datasource.enums.HealthStatus import HealthStatus
from datasource.pojos import HealthCheckResult

COMMAND_MODULE = 'datasource.management.commands.CheckAutotaskHealth'


@pytest.fixture
def datasourceClass(mocker):
    return mocker.patch(f'{COMMAND_MODULE}.AutotaskDatasource')


def runCommand(**options) -> str:
    stdout = StringIO()
    call_command('CheckAutotaskHealth', stdout=stdout, **options)
    return stdout.getvalue()


class TestCheckAutotaskHealth:

    def test_healthy(self, datasourceClass):
        datasourceClass.return_value.checkHealth.return_value = HealthCheckResult(
            HealthStatus.OK, 'Connected to Autotask (Zone: Zone 2)'
        )

        output = runCommand(username='api@example.com', secret='s3cret', integration_code='CODE')

        assert '✓ Connected to Autotask (Zone: Zone 2)' in output
        settings = datasourceClass.call_args.args[0]
        assert settings.username == 'api@example.com'
        assert settings.url == 'https://webservices.autotask.net'
        datasourceClass.return_value.dispose.assert_called_once()

    def test_unhealthy(self, datasourceClass):
        datasourceClass.return_value.checkHealth.return_value = HealthCheckResult(
            HealthStatus.ERROR, 'Failed to connect to Autotask: denied'
        )

        with pytest.raises(CommandError, match='denied'):
            runCommand(username='api@example.com', secret='s3cret', integration_code='CODE')

        datasourceClass.return_value.dispose.assert_called_once()

    def test_missing_credentials(self, datasourceClass):
        with pytest.raises(CommandError, match='secret is required'):
            runCommand(username='api@example.com', secret='', integration_code='CODE')

        datasourceClass.assert_not_called()
