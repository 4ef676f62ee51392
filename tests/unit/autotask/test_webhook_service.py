"""
Tests for webhook registration CRUD.
"""
import json

from autotask.pojos.Webhook import Webhook


class TestWebhookService:

    def test_create_webhook(self, autotaskClient, fakeAutotask):
        fakeAutotask.on('POST', 'Webhooks', (200, {'itemId': 12}))

        webhook = autotaskClient.webhooks.createWebhook('https://hooks.example.com/at', ['ticket.created'])

        assert webhook == Webhook(id=12, url='https://hooks.example.com/at', events=['ticket.created'])
        assert json.loads(fakeAutotask.apiRequests[0].body) == {
            'url': 'https://hooks.example.com/at',
            'events': ['ticket.created'],
        }

    def test_delete_webhook(self, autotaskClient, fakeAutotask):
        fakeAutotask.on('DELETE', 'Webhooks/12', (200, None))

        autotaskClient.webhooks.deleteWebhook(12)

        assert fakeAutotask.apiRequests[0].method == 'DELETE'

    def test_list_webhooks(self, autotaskClient, fakeAutotask):
        fakeAutotask.on('GET', 'Webhooks/query', (200, {'items': [
            {'id': 1, 'url': 'https://a.example.com', 'events': ['ticket.created']},
            {'id': 2, 'url': 'https://b.example.com', 'events': []},
        ]}))

        webhooks = autotaskClient.webhooks.listWebhooks()

        assert [webhook.id for webhook in webhooks] == [1, 2]
        assert webhooks[0].events == ['ticket.created']
