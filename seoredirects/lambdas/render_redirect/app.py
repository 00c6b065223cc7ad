import logging
from urllib.parse import unquote

from seoredirects.types import LambdaEvent, LambdaContext, LambdaResponse
from seoredirects.dao import redirect_dao, DAO_SETUP_ERRORS
from seoredirects.services import RedirectService
from seoredirects.utils import load_config, base_url, render_redirect_page, render_not_found_page
from seoredirects.utils.helpers import guarantee_500_response
from seoredirects.utils.responses import html_response
from seoredirects.lambdas.render_redirect.constants import (
    MISSING_SLUG,
    REDIRECT_NOT_FOUND,
    REDIRECTS_UNAVAILABLE,
    REDIRECT_RENDERED,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Render the SEO page of the redirect addressed by the `slug` path parameter

    HTTP responses:
        200: HTML page with the redirect's metadata, content and related redirects
        404: HTML "Page Not Found" page (unknown slug or unavailable storage)
    """
    slug = unquote((event.get('pathParameters') or {}).get('slug') or '')
    if not slug:
        logger.info('Missing "slug" in path. Responding with 404.', extra={'event': MISSING_SLUG})
        return html_response(404, render_not_found_page())

    try:
        app_config = load_config('render_redirect')
        dao = redirect_dao(app_config)
    except DAO_SETUP_ERRORS:
        logger.warning(
            'Redirect storage unavailable. Responding with 404.',
            exc_info=True,
            extra={'event': REDIRECTS_UNAVAILABLE, 'slug': slug},
        )
        return html_response(404, render_not_found_page())

    base = base_url(event)
    service = RedirectService(dao, base)

    redirect = service.get(slug)
    if redirect is None:
        logger.info('Redirect not found. Responding with 404.', extra={'event': REDIRECT_NOT_FOUND, 'slug': slug})
        return html_response(404, render_not_found_page())

    logger.info('Rendering redirect page. Responding with 200.', extra={'event': REDIRECT_RENDERED, 'slug': slug})
    return html_response(200, render_redirect_page(slug, redirect, base, related=service.get_all()))
