import json
import base64
import binascii
import logging

from seoredirects.types import LambdaEvent, LambdaContext, LambdaResponse
from seoredirects.dao import redirect_dao, DAO_SETUP_ERRORS
from seoredirects.exceptions import RedirectValidationError
from seoredirects.services import RedirectService
from seoredirects.utils import load_config, base_url
from seoredirects.utils.helpers import guarantee_500_response
from seoredirects.utils.responses import json_response, response_400, response_500
from seoredirects.lambdas.create_redirect.constants import (
    INVALID_JSON_BODY,
    INVALID_REQUEST_BODY,
    MISSING_REQUIRED_FIELDS,
    CONFIGURATION_ERROR,
    REDIRECT_SAVED,
    REDIRECT_NOT_PERSISTED,
)


logger = logging.getLogger(__name__)


def request_body(event: LambdaEvent) -> str:
    body = event.get('body') or '{}'
    if event.get('isBase64Encoded'):
        body = base64.b64decode(body).decode('utf-8')
    return body


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to create or update a redirect

    This Lambda handler follows this procedure:
    - Step 1: Parse the JSON request body
    - Step 2: Build the redirect service from the app config
    - Step 3: Validate, allocate a slug and store the redirect
    - Step 4: Respond with the short and long URLs

    HTTP responses:
        200: Redirect created or updated
            long: storage-independent long URL
            short: short URL
            slug: final slug
            success: true
            isUpdate: whether an existing slug was updated
            data: stored redirect record
            warning: present only if the redirect couldn't be persisted
        400: Bad client request
            message: invalid JSON, non-object body or missing title/desc/url
        500: Internal server error
            message: configuration or unexpected failure

    Example:
        >>> event = {'body': '{"title": "Hello World", "desc": "Test", "url": "https://example.com"}'}
        >>> response = lambda_handler(event, None)
        >>> json.loads(response['body'])['short']
        'http://localhost:3000/hello-world'
    """
    # 1- Parse request body
    try:
        payload = json.loads(request_body(event))
    except (json.JSONDecodeError, UnicodeDecodeError, binascii.Error) as e:
        logger.info('Invalid JSON body. Responding with 400.', extra={'event': INVALID_JSON_BODY})
        return response_400(message=f'invalid JSON body: {e}', error_code=INVALID_JSON_BODY)

    if not isinstance(payload, dict):
        logger.info('JSON body is not an object. Responding with 400.', extra={'event': INVALID_REQUEST_BODY})
        return response_400(message='JSON body must be an object', error_code=INVALID_REQUEST_BODY)

    # 2- Build the redirect service
    try:
        app_config = load_config('create_redirect')
        dao = redirect_dao(app_config)
    except DAO_SETUP_ERRORS as e:
        logger.exception('Failed to set up redirect storage. Responding with 500.', extra={'event': CONFIGURATION_ERROR})
        return response_500(message=str(e), error_code=CONFIGURATION_ERROR)

    service = RedirectService(dao, base_url(event))

    # 3- Validate and store the redirect
    try:
        result = service.save(payload)
    except RedirectValidationError as e:
        logger.info(
            'Missing required redirect fields. Responding with 400.',
            extra={'event': MISSING_REQUIRED_FIELDS, 'fields': list(e.fields)},
        )
        return response_400(message=str(e), error_code=MISSING_REQUIRED_FIELDS)

    # 4- Respond with the URLs
    logger.info(
        'Redirect saved. Responding with 200.',
        extra={
            'event': REDIRECT_SAVED if result.persisted else REDIRECT_NOT_PERSISTED,
            'slug': result.slug,
            'isUpdate': result.is_update,
        },
    )
    return json_response(200, result.to_response())
