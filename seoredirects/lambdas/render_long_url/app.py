import logging
from urllib.parse import parse_qsl

from seoredirects.types import LambdaEvent, LambdaContext, LambdaResponse
from seoredirects.models import RedirectModel
from seoredirects.utils import base_url, build_long_url, render_redirect_page
from seoredirects.utils.helpers import guarantee_500_response
from seoredirects.utils.render import render_bad_request_page
from seoredirects.utils.responses import html_response
from seoredirects.lambdas.render_long_url.constants import MISSING_PARAMETERS, LONG_URL_RENDERED


logger = logging.getLogger(__name__)

REQUIRED_PARAMETERS = ('title', 'desc', 'url')


def _query_parameters(event: LambdaEvent) -> dict[str, str]:
    """Read the query string, decoding `+` as a space

    HTTP API events carry the raw query string. REST API events only carry
    `queryStringParameters`, already decoded by API Gateway.
    """
    raw = event.get('rawQueryString')
    if raw:
        return dict(parse_qsl(raw, keep_blank_values=True))
    return event.get('queryStringParameters') or {}


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Render a redirect page purely from the long URL's query string

    Works without any storage, so long URLs keep working even when a redirect
    was never persisted.

    HTTP responses:
        200: HTML page with the metadata carried by the query string
        400: HTML page listing the missing title/desc/url parameters
    """
    params = {name: value.strip() for name, value in _query_parameters(event).items() if value}

    missing = [name for name in REQUIRED_PARAMETERS if not params.get(name)]
    if missing:
        logger.info('Missing long URL parameters. Responding with 400.', extra={'event': MISSING_PARAMETERS, 'missing': missing})
        return html_response(400, render_bad_request_page(missing))

    base = base_url(event)
    redirect = RedirectModel.from_dict(params)

    logger.info('Rendering long URL page. Responding with 200.', extra={'event': LONG_URL_RENDERED})
    return html_response(200, render_redirect_page('u', redirect, base, canonical=build_long_url(base, redirect)))
