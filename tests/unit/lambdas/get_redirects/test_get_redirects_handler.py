import json
from unittest.mock import MagicMock

import pytest

from seoredirects.lambdas.get_redirects import app
from seoredirects.models import RedirectModel
from seoredirects.exceptions import BadConfigurationError


@pytest.fixture(autouse=True)
def _patch_lambda_dependencies(monkeypatch, config, file_dao):
    monkeypatch.setattr(app, 'load_config', lambda *a, **kw: config)
    monkeypatch.setattr(app, 'redirect_dao', lambda *a, **kw: file_dao)


@pytest.fixture()
def stored(file_dao):
    redirects = {
        'alpha': RedirectModel(title='Alpha', desc='First', url='https://a.io', type='article', created_at='2025-10-01T00:00:00.000Z'),
        'beta': RedirectModel(title='beta', desc='Second', url='https://b.io', keywords='python', created_at='2025-10-03T00:00:00.000Z'),
        'gamma': RedirectModel(title='Gamma', desc='Third', url='https://g.io', type='video', created_at='2025-10-02T00:00:00.000Z'),
    }
    for slug, redirect in redirects.items():
        file_dao.save(slug, redirect)
    return redirects


def test_lambda_handler(apigw_event, context, stored):
    response = app.lambda_handler(apigw_event('GET', '/api/get-redirects'), context)
    body = json.loads(response['body'])

    assert response['statusCode'] == 200
    assert list(body) == ['beta', 'gamma', 'alpha']
    assert body['alpha'] == stored['alpha'].to_dict()


def test_lambda_handler_with_empty_storage(apigw_event, context):
    response = app.lambda_handler(apigw_event('GET', '/api/get-redirects'), context)

    assert response['statusCode'] == 200
    assert json.loads(response['body']) == {}


@pytest.mark.parametrize(
    'query, expected',
    [
        ({'search': 'PYTHON'}, ['beta']),
        ({'search': ' gam '}, ['gamma']),
        ({'type': 'article'}, ['alpha']),
        ({'type': 'all', 'sort': 'title'}, ['alpha', 'beta', 'gamma']),
        ({'sort': 'type'}, ['alpha', 'gamma', 'beta']),
        ({'search': 'nothing matches'}, []),
    ],
)
def test_lambda_handler_with_query(apigw_event, context, stored, query, expected):
    response = app.lambda_handler(apigw_event('GET', '/api/get-redirects', query=query), context)

    assert list(json.loads(response['body'])) == expected


def test_lambda_handler_with_unavailable_storage(monkeypatch, apigw_event, context):
    monkeypatch.setattr(app, 'redirect_dao', MagicMock(side_effect=BadConfigurationError('Unknown storage backend')))

    response = app.lambda_handler(apigw_event('GET', '/api/get-redirects'), context)

    assert response['statusCode'] == 200
    assert json.loads(response['body']) == {}
