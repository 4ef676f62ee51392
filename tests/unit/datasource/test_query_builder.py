"""
Tests for combining the user filter with the panel time range.
"""
from datetime import datetime, timezone

import pytest

from autotask.FilterExpressionParser import FilterExpressionError
from datasource.enums.QueryType import QueryType
from datasource.pojos import QueryModel, TimeRange
from datasource.QueryBuilder import QueryBuilder

TIME_RANGE = TimeRange(datetime(2024, 1, 1, tzinfo=timezone.utc), datetime(2024, 1, 2, tzinfo=timezone.utc))

TIME_NODE = {'op': 'and', 'items': [
    {'op': 'gte', 'field': 'createDate', 'value': '2024-01-01T00:00:00Z'},
    {'op': 'lte', 'field': 'createDate', 'value': '2024-01-02T00:00:00Z'},
]}


def build(**kwargs) -> dict:
    options = {'refId': 'A', 'queryType': QueryType.TICKETS}
    options.update(kwargs)
    return QueryBuilder.buildParams(QueryModel(**options)).toDict()


class TestBuildParams:

    def test_filter_only(self):
        assert build(filter='status=1') == {
            'filter': [{'field': 'status', 'op': 'eq', 'value': '1'}],
            'maxRecords': 500,
        }

    def test_filter_conjoined_with_time_range(self):
        params = build(filter='status=1', timeField='createDate', timeRange=TIME_RANGE, maxRecords=100)

        assert params == {
            'filter': [{'op': 'and', 'items': [
                {'op': 'eq', 'field': 'status', 'value': '1'},
                TIME_NODE,
            ]}],
            'maxRecords': 100,
        }

    def test_default_filter_conjoined_with_time_range(self):
        params = build(timeField='createDate', timeRange=TIME_RANGE)

        assert params['filter'] == [{'op': 'and', 'items': [
            {'op': 'noteq', 'field': 'Status', 'value': 5},
            TIME_NODE,
        ]}]

    def test_time_range_alone_when_collection_has_no_default(self):
        params = build(queryType=QueryType.CONTACTS, timeField='createDate', timeRange=TIME_RANGE)

        assert params['filter'] == [TIME_NODE]

    def test_time_field_without_range_is_ignored(self, mocker):
        logger = mocker.patch('datasource.QueryBuilder.logger')

        params = build(filter='status=1', timeField='createDate')

        assert params['filter'] == [{'field': 'status', 'op': 'eq', 'value': '1'}]
        logger.warning.assert_called_once()

    def test_range_without_time_field_is_ignored(self):
        assert build(filter='status=1', timeRange=TIME_RANGE)['filter'] == [
            {'field': 'status', 'op': 'eq', 'value': '1'}
        ]

    def test_page_size_is_capped(self):
        assert build(maxRecords=5000)['maxRecords'] == 500

    def test_malformed_filter(self):
        with pytest.raises(FilterExpressionError):
            build(filter='status')
