import logging

from seoredirects.types import LambdaEvent, LambdaContext, LambdaResponse
from seoredirects.dao import redirect_dao, DAO_SETUP_ERRORS
from seoredirects.services import RedirectService
from seoredirects.utils import load_config, base_url, filter_redirects, sort_redirects
from seoredirects.utils.helpers import guarantee_500_response
from seoredirects.utils.responses import json_response
from seoredirects.lambdas.get_redirects.constants import REDIRECTS_LISTED, REDIRECTS_UNAVAILABLE


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """List stored redirects as a slug -> record mapping

    Optional query parameters:
        search: case-insensitive substring over slug, title, description, keywords and site name
        type: Open Graph content type, or 'all'
        sort: 'recent' (default), 'title' or 'type'

    HTTP responses:
        200: mapping of slug to redirect record (empty when storage is unavailable)
    """
    try:
        app_config = load_config('get_redirects')
        dao = redirect_dao(app_config)
    except DAO_SETUP_ERRORS:
        logger.warning(
            'Redirect storage unavailable. Responding with an empty mapping.',
            exc_info=True,
            extra={'event': REDIRECTS_UNAVAILABLE},
        )
        return json_response(200, {})

    service = RedirectService(dao, base_url(event))
    params = event.get('queryStringParameters') or {}

    redirects = filter_redirects(
        service.get_all(),
        search=(params.get('search') or '').strip(),
        type_filter=params.get('type') or 'all',
    )
    redirects = sort_redirects(redirects, sort_by=params.get('sort') or 'recent')

    logger.info('Listing redirects. Responding with 200.', extra={'event': REDIRECTS_LISTED, 'count': len(redirects)})
    return json_response(200, {slug: redirect.to_dict() for slug, redirect in redirects.items()})
