"""
Tests for settings, time range and query model parsing.
"""
from datetime import datetime, timezone

import pytest

from datasource.enums.QueryType import QueryType
from datasource.pojos import DatasourceSettings, QueryModel, TimeRange
from framework.APIErrors import ConfigError


class TestDatasourceSettings:

    def test_reads_plugin_context(self, instanceSettings):
        settings = DatasourceSettings.fromPluginContext({'dataSourceInstanceSettings': instanceSettings})

        assert settings.uid == 'autotask-prod'
        assert settings.username == 'api@example.com'
        assert settings.secret == 's3cret'
        assert settings.integrationCode == 'INTEGRATION-CODE'
        assert settings.url == 'https://webservices.autotask.net'
        assert settings.updated == '2024-05-01T10:00:00Z'

    def test_url_falls_back_to_instance_url_then_default(self, instanceSettings):
        instanceSettings['jsonData'].pop('url')
        instanceSettings['url'] = 'https://webservices.sandbox.autotask.net'
        assert DatasourceSettings.fromInstanceSettings(instanceSettings).url == 'https://webservices.sandbox.autotask.net'

        instanceSettings['url'] = ''
        assert DatasourceSettings.fromInstanceSettings(instanceSettings).url == 'https://webservices.autotask.net'

    @pytest.mark.parametrize('section,key,message', [
        ('jsonData', 'username', 'username is required'),
        ('decryptedSecureJsonData', 'secret', 'secret is required'),
        ('decryptedSecureJsonData', 'integrationCode', 'integration code is required'),
    ])
    def test_missing_fields(self, instanceSettings, section, key, message):
        instanceSettings[section].pop(key)

        with pytest.raises(ConfigError) as excinfo:
            DatasourceSettings.fromInstanceSettings(instanceSettings)

        assert str(excinfo.value) == message

    def test_missing_plugin_context(self):
        with pytest.raises(ConfigError):
            DatasourceSettings.fromPluginContext(None)

    def test_repr_hides_credentials(self, instanceSettings):
        settings = DatasourceSettings.fromInstanceSettings(instanceSettings)

        assert 's3cret' not in repr(settings)
        assert 'INTEGRATION-CODE' not in repr(settings)


class TestTimeRange:

    def test_epoch_millis(self):
        timeRange = TimeRange.fromDict({'from': 1704067200000, 'to': 1704153600000})

        assert timeRange.startRFC3339 == '2024-01-01T00:00:00Z'
        assert timeRange.endRFC3339 == '2024-01-02T00:00:00Z'

    def test_absent_is_none(self):
        assert TimeRange.fromDict(None) is None
        assert TimeRange.fromDict({'from': 1704067200000}) is None

    def test_non_object_is_rejected(self):
        with pytest.raises(ValueError):
            TimeRange.fromDict('yesterday')

    def test_unrepresentable_boundary_is_rejected(self):
        with pytest.raises(ValueError):
            TimeRange.fromDict({'from': 10 ** 20, 'to': 10 ** 21})

    def test_inverted_range(self):
        with pytest.raises(ValueError):
            TimeRange.fromDict({'from': '2024-01-02T00:00:00Z', 'to': '2024-01-01T00:00:00Z'})


class TestQueryModel:

    def test_from_dict(self):
        model = QueryModel.fromDict({
            'refId': 'B',
            'queryType': 'tickets',
            'filter': 'status=1',
            'timeField': ' createDate ',
            'maxRecords': 50,
        })

        assert model.refId == 'B'
        assert model.queryType == QueryType.TICKETS
        assert model.filter == 'status=1'
        assert model.timeField == 'createDate'
        assert model.recordLimit == 50
        assert model.timeRange is None

    def test_default_record_limit(self):
        assert QueryModel.fromDict({'queryType': 'companies'}).recordLimit == 500

    def test_own_time_range_wins_over_default(self):
        default = TimeRange(datetime(2020, 1, 1, tzinfo=timezone.utc), datetime(2020, 1, 2, tzinfo=timezone.utc))

        model = QueryModel.fromDict(
            {'queryType': 'tickets', 'timeRange': {'from': 1704067200000, 'to': 1704153600000}},
            default
        )

        assert model.timeRange.startRFC3339 == '2024-01-01T00:00:00Z'
        assert QueryModel.fromDict({'queryType': 'tickets'}, default).timeRange is default

    def test_unknown_query_type(self):
        with pytest.raises(ValueError) as excinfo:
            QueryModel.fromDict({'queryType': 'invoices'})

        assert str(excinfo.value) == 'unknown query type: invoices'

    def test_non_string_time_field(self):
        with pytest.raises(ValueError) as excinfo:
            QueryModel.fromDict({'queryType': 'tickets', 'timeField': 5})

        assert str(excinfo.value) == 'timeField must be a string'

    @pytest.mark.parametrize('maxRecords', ['many', True, [10]])
    def test_bad_max_records(self, maxRecords):
        with pytest.raises(ValueError):
            QueryModel.fromDict({'queryType': 'tickets', 'maxRecords': maxRecords})
