"""Server-side HTML rendering of redirect pages.

Pages carry the SEO metadata of a redirect (title, description, keywords,
canonical link, Open Graph, Twitter card and robots tags) plus a small amount
of visible content. All interpolated values are HTML-escaped.
"""

import html
from string import Template

from seoredirects.constants import Defaults, RELATED_REDIRECTS_LIMIT
from seoredirects.models import RedirectModel
from seoredirects.utils.helpers import build_short_url
from seoredirects.utils.text import strip_markdown, truncate_for_meta, markdown_to_html


ROBOTS = 'index, follow, max-video-preview:-1, max-image-preview:large, max-snippet:-1'

PAGE_TEMPLATE = Template("""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>$page_title</title>
$meta
</head>
<body>
<main>
$content
</main>
<footer><p>$site_title</p></footer>
</body>
</html>
""")


def _e(value: str) -> str:
    return html.escape(value or '', quote=True)


def _meta(attribute: str, key: str, value: str) -> str:
    return f'<meta {attribute}="{_e(key)}" content="{_e(value)}">'


def _page(page_title: str, meta: list[str], content: list[str]) -> str:
    return PAGE_TEMPLATE.substitute(
        page_title=_e(page_title),
        meta='\n'.join(meta),
        content='\n'.join(content),
        site_title=_e(Defaults.SITE_TITLE),
    )


def render_redirect_page(
    slug: str,
    redirect: RedirectModel,
    base_url: str,
    related: dict[str, RedirectModel] | None = None,
    canonical: str | None = None,
) -> str:
    """Render the public page of a redirect.

    `related` lists other redirects to link to; the current slug is skipped
    and at most six entries are shown. `canonical` defaults to the short URL.
    """
    canonical = canonical or build_short_url(base_url, slug)
    description = truncate_for_meta(strip_markdown(redirect.desc))

    meta = [
        _meta('name', 'description', description),
        _meta('name', 'keywords', redirect.keywords),
        f'<link rel="canonical" href="{_e(canonical)}">',
        _meta('name', 'robots', ROBOTS),
        _meta('name', 'googlebot', ROBOTS),
        _meta('property', 'og:title', redirect.title),
        _meta('property', 'og:description', description),
        _meta('property', 'og:type', redirect.type),
        _meta('property', 'og:url', canonical),
    ]
    if redirect.site_name:
        meta.append(_meta('property', 'og:site_name', redirect.site_name))
    if redirect.image:
        meta.append(_meta('property', 'og:image', redirect.image))
    if redirect.video:
        meta.append(_meta('property', 'og:video', redirect.video))
    meta += [
        _meta('name', 'twitter:card', 'summary_large_image'),
        _meta('name', 'twitter:title', redirect.title),
        _meta('name', 'twitter:description', description),
    ]
    if redirect.image:
        meta.append(_meta('name', 'twitter:image', redirect.image))

    content = [
        f'<h1>{_e(redirect.title)}</h1>',
        f'<div class="description">{markdown_to_html(redirect.desc)}</div>',
    ]
    if redirect.image:
        content.append(f'<img src="{_e(redirect.image)}" alt="{_e(redirect.title)}">')
    if redirect.video:
        content.append(f'<video src="{_e(redirect.video)}" controls></video>')
    content.append(f'<p><a href="{_e(redirect.url)}" rel="noopener">Continue to {_e(redirect.url)}</a></p>')

    others = [(other, r) for other, r in (related or {}).items() if other != slug][:RELATED_REDIRECTS_LIMIT]
    if others:
        content.append('<h2>Related</h2>')
        content.append('<ul>')
        for other, r in others:
            content.append(f'<li><a href="{_e(build_short_url(base_url, other))}">{_e(r.title)}</a></li>')
        content.append('</ul>')

    return _page(f'{redirect.title} | {Defaults.SITE_TITLE}', meta, content)


def render_not_found_page() -> str:
    return _page(
        f'Page Not Found | {Defaults.SITE_TITLE}',
        [_meta('name', 'description', 'The requested page could not be found.'), _meta('name', 'robots', 'noindex')],
        ['<h1>Page Not Found</h1>', '<p>The requested page could not be found.</p>'],
    )


def render_bad_request_page(missing: list[str]) -> str:
    detail = ', '.join(missing)
    return _page(
        f'Bad Request | {Defaults.SITE_TITLE}',
        [_meta('name', 'robots', 'noindex')],
        ['<h1>Bad Request</h1>', f'<p>Missing required parameters: {_e(detail)}</p>'],
    )
