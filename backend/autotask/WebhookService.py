"""
Webhook registration CRUD. Delivery of webhook events is not handled here.
"""
import logging
import threading
from typing import TYPE_CHECKING, List, Optional

from autotask.Constants import LOG_PREFIX_ENTITY
from autotask.EntityService import EntityService
from autotask.enums.EntityName import EntityName
from autotask.pojos.EntityQueryParams import EntityQueryParams
from autotask.pojos.Webhook import Webhook

if TYPE_CHECKING:
    from autotask.AutotaskClient import AutotaskClient

logger = logging.getLogger(__name__)


class WebhookService(EntityService[Webhook]):

    def __init__(self, client: 'AutotaskClient'):
        super().__init__(client, EntityName.WEBHOOKS, Webhook)

    def createWebhook(self, url: str, events: List[str], cancelEvent: Optional[threading.Event] = None) -> Webhook:
        webhook = self.create(Webhook(url=url, events=list(events)), cancelEvent=cancelEvent)
        logger.info(
            "%s :: Webhook created | ID: %s | URL: %s | Events: %s",
            LOG_PREFIX_ENTITY,
            webhook.id,
            url,
            ", ".join(events)
        )
        return webhook

    def deleteWebhook(self, webhookId: int, cancelEvent: Optional[threading.Event] = None):
        self.delete(webhookId, cancelEvent=cancelEvent)
        logger.info("%s :: Webhook deleted | ID: %s", LOG_PREFIX_ENTITY, webhookId)

    def listWebhooks(self, cancelEvent: Optional[threading.Event] = None) -> List[Webhook]:
        return self.queryAll(EntityQueryParams(), cancelEvent=cancelEvent)
