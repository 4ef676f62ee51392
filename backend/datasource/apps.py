import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class DatasourceConfig(AppConfig):
    """
    Datasource app configuration.
    Owns the instance registry shared by every request in this process.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'datasource'

    registry = None

    def ready(self):
        from datasource.AutotaskDatasource import AutotaskDatasource
        from datasource.InstanceRegistry import InstanceRegistry

        self.registry = InstanceRegistry(
            factory=AutotaskDatasource.fromSettings,
            disposer=lambda instance: instance.dispose()
        )
        logger.info("DATASOURCE_APP :: Instance registry initialized")
