import pytest

from seoredirects.dao import RedirectFileDAO


@pytest.fixture()
def apigw_event():
    """Build an API Gateway proxy event for the given method, path and parameters."""

    def _event(method='GET', path='/', body=None, query=None, path_params=None, **extra):
        return {
            'body': body,
            'resource': path,
            'headers': {'User-Agent': 'pytest'},
            'httpMethod': method,
            'path': path,
            'queryStringParameters': query,
            'pathParameters': path_params,
            'isBase64Encoded': False,
            'requestContext': {
                'resourcePath': path,
                'httpMethod': method,
                'domainName': 'testhost:1000',
                'stage': 'test',
            },
            **extra,
        }

    return _event


@pytest.fixture()
def context():
    class _Context:
        function_name = 'seoredirects'

    return _Context()


@pytest.fixture()
def config(tmp_path):
    return {'file': {'path': str(tmp_path / 'redirects.json')}}


@pytest.fixture()
def file_dao(tmp_path) -> RedirectFileDAO:
    return RedirectFileDAO(tmp_path / 'redirects.json')
