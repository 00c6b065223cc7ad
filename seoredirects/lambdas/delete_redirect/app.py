import logging

from seoredirects.types import LambdaEvent, LambdaContext, LambdaResponse
from seoredirects.dao import redirect_dao, DAO_SETUP_ERRORS
from seoredirects.dao.exceptions import DataStoreError, RedirectNotFoundError
from seoredirects.exceptions import RedirectValidationError
from seoredirects.services import RedirectService
from seoredirects.utils import load_config, base_url
from seoredirects.utils.helpers import guarantee_500_response
from seoredirects.utils.responses import json_response, response_400, response_404, response_500
from seoredirects.lambdas.delete_redirect.constants import (
    MISSING_SLUG,
    REDIRECT_NOT_FOUND,
    CONFIGURATION_ERROR,
    DELETE_FAILED,
    REDIRECT_DELETED,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Delete a redirect addressed by the `slug` query parameter

    HTTP responses:
        200: Redirect deleted
            success: true
            message: Redirect "<slug>" deleted successfully
            deletedSlug: <slug>
        400: missing or blank slug
        404: no redirect stored under the slug
        500: configuration failure or the deletion couldn't be persisted
    """
    slug = (event.get('queryStringParameters') or {}).get('slug')
    if not (slug or '').strip():
        logger.info('Missing "slug" in query. Responding with 400.', extra={'event': MISSING_SLUG})
        return response_400(message='Valid slug is required as query parameter', error_code=MISSING_SLUG)

    try:
        app_config = load_config('delete_redirect')
        dao = redirect_dao(app_config)
    except DAO_SETUP_ERRORS as e:
        logger.exception('Failed to set up redirect storage. Responding with 500.', extra={'event': CONFIGURATION_ERROR})
        return response_500(message=str(e), error_code=CONFIGURATION_ERROR)

    service = RedirectService(dao, base_url(event))

    try:
        deleted_slug = service.delete(slug)
    except RedirectValidationError as e:  # pragma: no cover
        return response_400(message=str(e), error_code=MISSING_SLUG)
    except RedirectNotFoundError as e:
        logger.info('Redirect not found. Responding with 404.', extra={'event': REDIRECT_NOT_FOUND, 'slug': slug.strip()})
        return response_404(message=str(e), error_code=REDIRECT_NOT_FOUND)
    except DataStoreError:
        logger.exception('Failed to persist deletion. Responding with 500.', extra={'event': DELETE_FAILED, 'slug': slug.strip()})
        return response_500(message='Failed to save changes', error_code=DELETE_FAILED)

    logger.info('Redirect deleted. Responding with 200.', extra={'event': REDIRECT_DELETED, 'slug': deleted_slug})
    return json_response(
        200,
        {
            'success': True,
            'message': f'Redirect "{deleted_slug}" deleted successfully',
            'deletedSlug': deleted_slug,
        },
    )
