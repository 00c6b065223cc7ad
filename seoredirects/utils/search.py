"""Admin list helpers: search, filter and sort stored redirects.

Example:
    >>> redirects = {'b': RedirectModel(title='Beta', desc='x', url='https://b.io'),
    ...              'a': RedirectModel(title='alpha', desc='x', url='https://a.io')}
    >>> list(sort_redirects(redirects, 'title'))
    ['a', 'b']
"""

from datetime import datetime, UTC
from enum import StrEnum

from seoredirects.models import RedirectModel
from seoredirects.utils.text import strip_markdown


EPOCH_START = datetime(1970, 1, 1, tzinfo=UTC)

ALL_TYPES = 'all'


class SortBy(StrEnum):
    TITLE = 'title'
    TYPE = 'type'
    RECENT = 'recent'


def matches_search(slug: str, redirect: RedirectModel, term: str) -> bool:
    """Case-insensitive substring match over slug, title, plain-text desc, keywords and site name."""
    needle = term.lower()
    haystacks = (slug, redirect.title, strip_markdown(redirect.desc), redirect.keywords, redirect.site_name)
    return any(needle in (haystack or '').lower() for haystack in haystacks)


def filter_redirects(
    redirects: dict[str, RedirectModel],
    search: str = '',
    type_filter: str = ALL_TYPES,
) -> dict[str, RedirectModel]:
    filtered = dict(redirects)
    if search:
        filtered = {slug: r for slug, r in filtered.items() if matches_search(slug, r, search)}
    if type_filter and type_filter != ALL_TYPES:
        filtered = {slug: r for slug, r in filtered.items() if r.type == type_filter}
    return filtered


def recency(redirect: RedirectModel) -> datetime:
    """Moment used to order redirects by recency: created_at, then updated_at, then the epoch start."""
    value = redirect.created_at or redirect.updated_at
    if not value:
        return EPOCH_START
    try:
        moment = datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        return EPOCH_START
    return moment if moment.tzinfo else moment.replace(tzinfo=UTC)


def sort_redirects(redirects: dict[str, RedirectModel], sort_by: str = SortBy.RECENT) -> dict[str, RedirectModel]:
    """Order redirects for display; unknown sort keys fall back to recency."""
    items = list(redirects.items())
    match sort_by:
        case SortBy.TITLE:
            items.sort(key=lambda item: item[1].title.casefold())
        case SortBy.TYPE:
            items.sort(key=lambda item: item[1].type.casefold())
        case _:
            items.sort(key=lambda item: recency(item[1]), reverse=True)
    return dict(items)
