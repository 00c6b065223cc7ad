"""XML sitemap generation.

The sitemap lists the site root, the admin route and one URL per stored slug.
`lastmod` is always the generation date, not the record's `updated_at`.

Example:
    >>> from datetime import date
    >>> print(generate_sitemap('https://x.io', ['hello-world'], date(2025, 10, 15)))
    <?xml version="1.0" encoding="UTF-8"?>
    <urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
      <url>
        <loc>https://x.io</loc>
    ...
"""

from datetime import date
from urllib.parse import quote
from xml.sax.saxutils import escape
from collections.abc import Iterable


SITEMAP_NAMESPACE = 'http://www.sitemaps.org/schemas/sitemap/0.9'

# Characters left untouched by JavaScript's encodeURIComponent()
URI_COMPONENT_SAFE = "-_.!~*'()"


def _url_entry(loc: str, lastmod: str, changefreq: str, priority: str) -> str:
    # fmt: off
    return (
        '  <url>\n'
        f'    <loc>{escape(loc)}</loc>\n'
        f'    <lastmod>{lastmod}</lastmod>\n'
        f'    <changefreq>{changefreq}</changefreq>\n'
        f'    <priority>{priority}</priority>\n'
        '  </url>\n'
    )
    # fmt: on


def generate_sitemap(base_url: str, slugs: Iterable[str], today: date) -> str:
    base = base_url.rstrip('/')
    lastmod = today.isoformat()

    entries = [
        _url_entry(base, lastmod, 'daily', '1.0'),
        _url_entry(f'{base}/admin', lastmod, 'weekly', '0.5'),
    ]
    for slug in slugs:
        entries.append(_url_entry(f'{base}/{quote(slug, safe=URI_COMPONENT_SAFE)}', lastmod, 'weekly', '0.9'))

    return f'<?xml version="1.0" encoding="UTF-8"?>\n<urlset xmlns="{SITEMAP_NAMESPACE}">\n{"".join(entries)}</urlset>'


def minimal_sitemap(base_url: str, today: date) -> str:
    return generate_sitemap(base_url, (), today)
