import os

from django.core.management.base import BaseCommand, CommandError

from datasource.AutotaskDatasource import AutotaskDatasource
from datasource.pojos.DatasourceSettings import DatasourceSettings
from framework.APIErrors import ConfigError


class Command(BaseCommand):
    help = 'Check connectivity to Autotask with the given credentials'

    def add_arguments(self, parser):
        parser.add_argument('--username', default=os.getenv('AUTOTASK_USERNAME', ''))
        parser.add_argument('--secret', default=os.getenv('AUTOTASK_SECRET', ''))
        parser.add_argument('--integration-code', default=os.getenv('AUTOTASK_INTEGRATION_CODE', ''))
        parser.add_argument('--url', default=os.getenv('AUTOTASK_URL', ''))

    def handle(self, *args, **options):
        try:
            settings = DatasourceSettings.fromInstanceSettings({
                'uid': 'cli',
                'jsonData': {'username': options['username'], 'url': options['url']},
                'decryptedSecureJsonData': {
                    'secret': options['secret'],
                    'integrationCode': options['integration_code'],
                },
            })
        except ConfigError as e:
            raise CommandError(str(e))

        self.stdout.write(f'Checking Autotask connection for {settings.username}...')

        datasource = AutotaskDatasource(settings)
        try:
            result = datasource.checkHealth()
        finally:
            datasource.dispose()

        if result.ok:
            self.stdout.write(self.style.SUCCESS(f'✓ {result.message}'))
        else:
            raise CommandError(result.message)
