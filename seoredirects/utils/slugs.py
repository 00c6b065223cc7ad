"""Slug allocation for redirects.

Slugs are URL-path-safe identifiers (lowercase letters, digits, hyphens)
used as the storage key of a redirect.

Functions:
    slugify(title, max_length=100) -> str
        Derive a slug from a human-readable title.
    fallback_slug(now) -> str
        Synthetic slug used when a title yields nothing usable.
    allocate_slug(candidate, title, exists, now) -> str
        Pick the slug for a new redirect, resolving collisions.

Example:
    >>> slugify('Hello, World!  Again')
    'hello-world-again'
    >>> allocate_slug('', 'Hello World', exists=lambda slug: False, now=datetime.now(UTC))
    'hello-world'
"""

import re
from datetime import datetime
from collections.abc import Callable

from seoredirects.constants import SLUG_MAX_LENGTH, FALLBACK_SLUG_PREFIX
from seoredirects.utils.helpers import epoch_millis


_DISALLOWED = re.compile(r'[^a-z0-9\s-]')
_WHITESPACE = re.compile(r'\s+')
_HYPHENS = re.compile(r'-+')


def slugify(title: str, max_length: int = SLUG_MAX_LENGTH) -> str:
    slug = _DISALLOWED.sub('', title.lower())
    slug = _WHITESPACE.sub('-', slug)
    slug = _HYPHENS.sub('-', slug)
    return slug.strip('-')[:max_length]


def fallback_slug(now: datetime) -> str:
    return f'{FALLBACK_SLUG_PREFIX}-{epoch_millis(now)}'


def allocate_slug(candidate: str, title: str, exists: Callable[[str], bool], now: datetime) -> str:
    """Pick the slug for a new redirect.

    A non-empty candidate is used verbatim. Otherwise the slug is derived from
    the title, falling back to a timestamped synthetic slug. If the result is
    already taken, `-<epoch millis>` is appended once (no further search).

    Args:
        candidate (str):
            User-supplied slug, or an empty string.
        title (str):
            Redirect title to derive a slug from.
        exists (Callable[[str], bool]):
            Lookup telling whether a slug is already stored.
        now (datetime):
            Current moment, used for the fallback and the collision suffix.

    Returns:
        str: slug to store the new redirect under
    """
    slug = candidate or slugify(title) or fallback_slug(now)
    if exists(slug):
        slug = f'{slug}-{epoch_millis(now)}'
    return slug
