"""
Unit tests for the request values and model container adapters.
"""

import json

import pytest
from django.http import QueryDict
from django.test import RequestFactory

from json_field_group import (
    FieldContainerProtocol,
    ModelContainer,
    RequestValues,
    RequestValuesProtocol,
)


def test_model_container_reports_json_casts(container):
    assert container.has_cast('meta')
    assert container.has_cast('extra')
    assert container.has_cast('options')
    assert not container.has_cast('notes')
    assert not container.has_cast('missing')


def test_model_container_accepts_extra_casts(article):
    assert ModelContainer(article, casts=['notes']).has_cast('notes')


def test_model_container_reads_json_paths(container):
    assert container.get('title') == 'Hello'
    assert container.get('meta->seo->keywords') == 'django'
    assert container.get('meta->seo->missing') is None


def test_model_container_writes_json_paths_without_touching_siblings(article, container):
    container.set('meta->seo->robots', 'noindex')
    assert article.meta == {
        'title': 'Old title',
        'seo': {'keywords': 'django', 'robots': 'noindex'},
    }


def test_model_container_writes_plain_attributes(article, container):
    container.set('title', 'Bye')
    assert article.title == 'Bye'


def test_adapters_satisfy_protocols(container):
    assert isinstance(container, FieldContainerProtocol)
    assert isinstance(RequestValues({}), RequestValuesProtocol)


def test_request_values_from_mapping():
    request = RequestValues({'meta->title': 'x', 'meta->empty': ''})
    assert request.exists('meta->empty')
    assert not request.exists('meta->other')
    assert request.get('meta->title') == 'x'
    assert request['meta->title'] == 'x'
    assert request.keys() == ['meta->title', 'meta->empty']
    assert request.only(['meta->title', 'meta->other']) == {'meta->title': 'x'}


def test_request_values_from_query_dict_use_last_value():
    request = RequestValues(QueryDict('meta->tag=a&meta->tag=b'))
    assert request['meta->tag'] == 'b'
    assert request.get('meta->tag') == 'b'


def test_request_values_from_form_post():
    http_request = RequestFactory().post('/admin/articles/1', {'meta->title': 'Posted'})
    request = RequestValues.from_http_request(http_request)
    assert request.get('meta->title') == 'Posted'


def test_request_values_from_json_body():
    http_request = RequestFactory().post(
        '/admin/articles/1',
        data=json.dumps({'meta->count': 3}),
        content_type='application/json',
    )
    request = RequestValues.from_http_request(http_request)
    assert request.get('meta->count') == 3


def test_request_values_reject_non_object_json_body():
    http_request = RequestFactory().post(
        '/admin/articles/1',
        data=json.dumps([1, 2]),
        content_type='application/json',
    )
    with pytest.raises(ValueError):
        RequestValues.from_http_request(http_request)
