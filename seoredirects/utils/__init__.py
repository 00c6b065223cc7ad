from seoredirects.utils.config import app_env, app_name, project_root, app_prefix, load_config
from seoredirects.utils.helpers import (
    base_url,
    build_short_url,
    build_long_url,
    utc_now,
    iso_timestamp,
    epoch_millis,
    require_environment,
    guarantee_500_response,
)
from seoredirects.utils.slugs import slugify, fallback_slug, allocate_slug
from seoredirects.utils.sitemap import generate_sitemap, minimal_sitemap
from seoredirects.utils.text import strip_markdown, truncate_for_meta, markdown_to_html
from seoredirects.utils.search import matches_search, filter_redirects, sort_redirects
from seoredirects.utils.render import render_redirect_page, render_not_found_page, render_bad_request_page
from seoredirects.utils.logging import initialize_logging
from seoredirects.utils.runtime import running_locally


__all__ = [
    'app_env',
    'app_name',
    'app_prefix',
    'project_root',
    'load_config',
    'base_url',
    'build_short_url',
    'build_long_url',
    'utc_now',
    'iso_timestamp',
    'epoch_millis',
    'require_environment',
    'guarantee_500_response',
    'slugify',
    'fallback_slug',
    'allocate_slug',
    'generate_sitemap',
    'minimal_sitemap',
    'strip_markdown',
    'truncate_for_meta',
    'markdown_to_html',
    'matches_search',
    'filter_redirects',
    'sort_redirects',
    'render_redirect_page',
    'render_not_found_page',
    'render_bad_request_page',
    'initialize_logging',
    'running_locally',
]
