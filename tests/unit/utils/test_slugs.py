"""Unit tests for slug allocation in slugs.py.

Test coverage includes:

1. slugify() derivation from titles
2. fallback_slug() synthetic slugs
3. allocate_slug() candidate/derived/fallback selection and collision suffix
"""

from datetime import datetime, UTC

import pytest

from seoredirects.utils.slugs import slugify, fallback_slug, allocate_slug


NOW = datetime(2025, 10, 15, tzinfo=UTC)
NOW_MILLIS = 1760486400000


# -------------------------------
# 1. slugify()
# -------------------------------


@pytest.mark.parametrize(
    'title, expected',
    [
        ('Hello World', 'hello-world'),
        ('Hello, World!  Again', 'hello-world-again'),
        ('  --Hello -- World--  ', 'hello-world'),
        ('Top 10 Tips_for SEO', 'top-10-tipsfor-seo'),
        ('Ünïcode Café', 'ncode-caf'),
        ('!!!', ''),
        ('', ''),
    ],
)
def test_slugify(title, expected):
    assert slugify(title) == expected


def test_slugify_truncates_to_100_characters():
    slug = slugify('a' * 150)
    assert slug == 'a' * 100


def test_slugify_output_is_path_safe():
    slug = slugify('What?! Is <this> /really/ a "title"?')
    assert slug == 'what-is-this-really-a-title'
    assert all(c.isdigit() or ('a' <= c <= 'z') or c == '-' for c in slug)


# -------------------------------
# 2. fallback_slug()
# -------------------------------


def test_fallback_slug():
    assert fallback_slug(NOW) == f'redirect-{NOW_MILLIS}'


# -------------------------------
# 3. allocate_slug()
# -------------------------------


def test_allocate_slug_prefers_candidate():
    assert allocate_slug('my-slug', 'Hello World', exists=lambda s: False, now=NOW) == 'my-slug'


def test_allocate_slug_derives_from_title():
    assert allocate_slug('', 'Hello World', exists=lambda s: False, now=NOW) == 'hello-world'


def test_allocate_slug_falls_back_when_title_has_no_usable_characters():
    assert allocate_slug('', '!!!', exists=lambda s: False, now=NOW) == f'redirect-{NOW_MILLIS}'


def test_allocate_slug_appends_timestamp_on_collision():
    taken = {'hello-world'}
    assert allocate_slug('', 'Hello World', exists=taken.__contains__, now=NOW) == f'hello-world-{NOW_MILLIS}'


def test_allocate_slug_suffixes_only_once():
    """The suffixed slug is not checked again."""
    checked = []

    def exists(slug):
        checked.append(slug)
        return True

    assert allocate_slug('', 'Hello World', exists=exists, now=NOW) == f'hello-world-{NOW_MILLIS}'
    assert checked == ['hello-world']
