import logging

from seoredirects.types import LambdaEvent, LambdaContext, LambdaResponse
from seoredirects.dao import redirect_dao
from seoredirects.services import RedirectService
from seoredirects.utils import load_config, base_url, utc_now, generate_sitemap, minimal_sitemap
from seoredirects.utils.helpers import guarantee_500_response
from seoredirects.utils.responses import xml_response
from seoredirects.lambdas.sitemap.constants import SITEMAP_GENERATED, SITEMAP_DEGRADED


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Serve `/sitemap.xml` listing the site root, the admin page and every slug

    HTTP responses:
        200: XML sitemap; a minimal root + admin sitemap if redirects can't be listed
    """
    base = base_url(event)
    today = utc_now().date()

    try:
        app_config = load_config('sitemap')
        service = RedirectService(redirect_dao(app_config), base)
        xml = generate_sitemap(base, service.get_all().keys(), today)
    except Exception:
        logger.exception('Failed to generate sitemap. Responding with minimal sitemap.', extra={'event': SITEMAP_DEGRADED})
        return xml_response(200, minimal_sitemap(base, today))

    logger.info('Sitemap generated. Responding with 200.', extra={'event': SITEMAP_GENERATED})
    return xml_response(200, xml)
