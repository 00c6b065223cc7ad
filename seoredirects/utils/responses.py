"""API Gateway (Lambda proxy) response builders.

JSON error bodies look like:

    {"message": "Bad Request (missing 'slug' in query)", "errorCode": "MISSING_SLUG"}
"""

import json
from typing import Any

from seoredirects.types import HttpHeaders, LambdaResponse


CORS_HEADERS: HttpHeaders = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Content-Type',
    'Access-Control-Allow-Methods': 'OPTIONS,GET,POST,DELETE',
}


def json_response(status_code: int, body: Any, headers: HttpHeaders | None = None) -> LambdaResponse:
    return {
        'statusCode': status_code,
        'headers': {
            'Content-Type': 'application/json',
            **CORS_HEADERS,
            **(headers or {}),
        },
        'body': json.dumps(body, ensure_ascii=False),
    }


def error_response(status_code: int, base: str, message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return json_response(status_code, body)


def response_400(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    return error_response(400, 'Bad Request', message, error_code)


def response_404(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    return error_response(404, 'Not Found', message, error_code)


def response_500(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    return error_response(500, 'Internal Server Error', message, error_code)


def html_response(status_code: int, html: str) -> LambdaResponse:
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'text/html; charset=utf-8'},
        'body': html,
    }


def xml_response(status_code: int, xml: str, cache_seconds: int = 3600) -> LambdaResponse:
    return {
        'statusCode': status_code,
        'headers': {
            'Content-Type': 'application/xml; charset=utf-8',
            'Cache-Control': f'public, max-age={cache_seconds}, s-maxage={cache_seconds}',
            'Access-Control-Allow-Origin': '*',
            'Access-Control-Allow-Methods': 'GET',
            'Access-Control-Allow-Headers': 'Content-Type',
        },
        'body': xml,
    }
