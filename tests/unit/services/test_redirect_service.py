"""Unit tests for RedirectService in redirect_service.py.

Test coverage includes:

1. Creation
   - Slug derived from the title, user-supplied slugs, collision suffixes
   - Field normalization (trimming, default type, non-standard types)
   - Required field validation

2. Update
   - Submitting an existing slug replaces the record and keeps `created_at`

3. Storage failures
   - A failed write still returns URLs, flagged with a warning
   - A corrupt store is left untouched

4. Deletion
   - Blank slugs, missing slugs and successful deletes
   - Deleting touches only the named record
"""

from datetime import datetime, UTC
from unittest.mock import MagicMock

import pytest
from freezegun import freeze_time

from seoredirects.models import RedirectModel
from seoredirects.exceptions import RedirectValidationError
from seoredirects.dao import RedirectFileDAO, RedirectBaseDAO
from seoredirects.dao.exceptions import DataStoreError, RedirectNotFoundError
from seoredirects.services import RedirectService, SaveResult
from seoredirects.services.redirect_service import NOT_PERSISTED_WARNING


NOW = datetime(2025, 10, 15, 12, 0, tzinfo=UTC)
NOW_MILLIS = 1760529600000


@pytest.fixture
def dao(tmp_path) -> RedirectFileDAO:
    return RedirectFileDAO(tmp_path / 'redirects.json')


@pytest.fixture
def service(dao: RedirectFileDAO) -> RedirectService:
    return RedirectService(dao, 'https://x.io/')


@pytest.fixture
def payload() -> dict:
    return {'title': 'Hello World', 'desc': 'Test **bold**', 'url': 'https://example.com'}


# -------------------------------
# 1. Creation
# -------------------------------


def test_create_redirect(service: RedirectService, dao: RedirectFileDAO, payload: dict):
    result = service.save(payload, now=NOW)

    assert isinstance(result, SaveResult)
    assert result.slug == 'hello-world'
    assert result.is_update is False
    assert result.persisted is True
    assert result.short_url == 'https://x.io/hello-world'
    assert result.long_url == 'https://x.io/u?title=Hello+World&desc=Test+%2A%2Abold%2A%2A&url=https%3A%2F%2Fexample.com&type=website'
    assert result.redirect.created_at == '2025-10-15T12:00:00.000Z'
    assert result.redirect.updated_at == '2025-10-15T12:00:00.000Z'
    assert dao.get('hello-world') == result.redirect


@freeze_time('2025-10-15 12:00:00')
def test_create_defaults_to_current_time(service: RedirectService, payload: dict):
    result = service.save(payload)
    assert result.redirect.created_at == '2025-10-15T12:00:00.000Z'


def test_create_response_body(service: RedirectService, payload: dict):
    body = service.save(payload, now=NOW).to_response()

    assert body['success'] is True
    assert body['isUpdate'] is False
    assert body['slug'] == 'hello-world'
    assert body['short'] == 'https://x.io/hello-world'
    assert body['long'].startswith('https://x.io/u?')
    assert body['data']['title'] == 'Hello World'
    assert 'warning' not in body


def test_create_normalizes_fields(service: RedirectService):
    result = service.save(
        {'title': '  Hello World ', 'desc': ' d ', 'url': ' https://e.com ', 'image': '   ', 'type': '', 'extra': 'ignored'},
        now=NOW,
    )

    assert result.redirect.title == 'Hello World'
    assert result.redirect.url == 'https://e.com'
    assert result.redirect.image == ''
    assert result.redirect.type == 'website'


def test_create_keeps_non_standard_type(service: RedirectService, payload: dict):
    result = service.save({**payload, 'type': 'podcast'}, now=NOW)
    assert result.redirect.type == 'podcast'


def test_create_with_custom_slug(service: RedirectService, payload: dict):
    result = service.save({**payload, 'slug': '  my-link '}, now=NOW)

    assert result.slug == 'my-link'
    assert result.is_update is False


def test_create_with_unsluggable_title(service: RedirectService):
    result = service.save({'title': '¡¿?!', 'desc': 'd', 'url': 'https://e.com'}, now=NOW)
    assert result.slug == f'redirect-{NOW_MILLIS}'


def test_create_resolves_slug_collision(service: RedirectService, dao: RedirectFileDAO, payload: dict):
    first = service.save(payload, now=NOW)
    second = service.save({**payload, 'desc': 'Another'}, now=NOW)

    assert first.slug == 'hello-world'
    assert second.slug == f'hello-world-{NOW_MILLIS}'
    assert second.is_update is False
    assert set(dao.get_all()) == {'hello-world', f'hello-world-{NOW_MILLIS}'}
    assert dao.get('hello-world').desc == 'Test **bold**'


@pytest.mark.parametrize(
    'overrides, missing',
    [
        ({'title': ''}, ('title',)),
        ({'desc': '   '}, ('desc',)),
        ({'url': None}, ('url',)),
        ({'title': '', 'desc': '', 'url': ''}, ('title', 'desc', 'url')),
    ],
)
def test_create_requires_fields(service: RedirectService, dao: RedirectFileDAO, payload: dict, overrides: dict, missing: tuple):
    with pytest.raises(RedirectValidationError, match='Title, description, and URL are required') as exc_info:
        service.save({**payload, **overrides}, now=NOW)

    assert exc_info.value.fields == missing
    assert dao.get_all() == {}


# -------------------------------
# 2. Update
# -------------------------------


def test_update_existing_redirect(service: RedirectService, dao: RedirectFileDAO, payload: dict):
    service.save(payload, now=NOW)
    later = datetime(2025, 10, 16, 8, 30, tzinfo=UTC)

    result = service.save({**payload, 'slug': 'hello-world', 'title': 'Changed'}, now=later)

    assert result.slug == 'hello-world'
    assert result.is_update is True
    assert result.redirect.title == 'Changed'
    assert result.redirect.created_at == '2025-10-15T12:00:00.000Z'
    assert result.redirect.updated_at == '2025-10-16T08:30:00.000Z'
    assert dao.get_all() == {'hello-world': result.redirect}


def test_update_replaces_optional_fields(service: RedirectService, dao: RedirectFileDAO, payload: dict):
    service.save({**payload, 'image': 'https://e.com/a.png'}, now=NOW)

    result = service.save({**payload, 'slug': 'hello-world'}, now=NOW)

    assert result.redirect.image == ''
    assert dao.get('hello-world').image == ''


def test_update_legacy_record_without_created_at(service: RedirectService, dao: RedirectFileDAO, payload: dict):
    dao.save('legacy', RedirectModel(title='Old', desc='d', url='https://e.com'))

    result = service.save({**payload, 'slug': 'legacy'}, now=NOW)

    assert result.is_update is True
    assert result.redirect.created_at == '2025-10-15T12:00:00.000Z'


# -------------------------------
# 3. Storage failures
# -------------------------------


def test_save_failure_returns_urls_with_warning(payload: dict):
    dao = MagicMock(spec=RedirectBaseDAO)
    dao.get.return_value = None
    dao.save.side_effect = DataStoreError('read-only file system')
    service = RedirectService(dao, 'https://x.io')

    result = service.save(payload, now=NOW)

    assert result.persisted is False
    assert result.warning == NOT_PERSISTED_WARNING
    assert result.to_response()['warning'] == NOT_PERSISTED_WARNING
    assert result.short_url == 'https://x.io/hello-world'
    assert result.long_url.startswith('https://x.io/u?title=Hello+World')


def test_save_with_unreadable_store_creates_new_redirect(payload: dict):
    dao = MagicMock(spec=RedirectBaseDAO)
    dao.get.return_value = None
    service = RedirectService(dao, 'https://x.io')

    result = service.save({**payload, 'slug': 'hello-world'}, now=NOW)

    assert result.is_update is False
    dao.save.assert_called_once_with('hello-world', result.redirect)


def test_save_over_corrupt_store_keeps_file_and_warns(tmp_path, payload: dict):
    path = tmp_path / 'redirects.json'
    path.write_text('{"other": {"title": "Other"', encoding='utf-8')
    service = RedirectService(RedirectFileDAO(path), 'https://x.io')

    result = service.save(payload, now=NOW)

    assert result.persisted is False
    assert result.warning == NOT_PERSISTED_WARNING
    assert path.read_text(encoding='utf-8') == '{"other": {"title": "Other"'


# -------------------------------
# 4. Deletion
# -------------------------------


def test_delete_redirect(service: RedirectService, dao: RedirectFileDAO, payload: dict):
    service.save(payload, now=NOW)

    assert service.delete(' hello-world ') == 'hello-world'
    assert dao.get_all() == {}


@pytest.mark.parametrize('slug', [None, '', '   '])
def test_delete_requires_slug(service: RedirectService, slug):
    with pytest.raises(RedirectValidationError, match='Valid slug is required as query parameter'):
        service.delete(slug)


def test_delete_missing_redirect(service: RedirectService):
    with pytest.raises(RedirectNotFoundError, match='Redirect "missing" not found'):
        service.delete('missing')


def test_delete_missing_redirect_leaves_store_unchanged(service: RedirectService, dao: RedirectFileDAO, payload: dict):
    for title in ('One', 'Two', 'Three'):
        service.save({**payload, 'title': title}, now=NOW)
    before = dao.get_all()

    with pytest.raises(RedirectNotFoundError):
        service.delete('missing')

    assert dao.get_all() == before
    assert sorted(before) == ['one', 'three', 'two']


def test_delete_removes_exactly_one_redirect(service: RedirectService, dao: RedirectFileDAO, payload: dict):
    for title in ('One', 'Two', 'Three'):
        service.save({**payload, 'title': title}, now=NOW)

    service.delete('two')

    assert sorted(dao.get_all()) == ['one', 'three']


def test_delete_propagates_storage_failure():
    dao = MagicMock(spec=RedirectBaseDAO)
    dao.delete.side_effect = DataStoreError('read-only file system')

    with pytest.raises(DataStoreError):
        RedirectService(dao).delete('hello-world')
