"""Redirect Service: validation, slug allocation and CRUD over a redirect DAO.

Responsibilities:
    - Validate and normalize create/update requests;
    - Allocate slugs for new redirects and resolve collisions;
    - Maintain `created_at` / `updated_at` timestamps;
    - Build the short (`<base>/<slug>`) and long (`<base>/u?<query>`) URLs of a redirect.

Example:
    >>> from seoredirects.dao import RedirectFileDAO
    >>> service = RedirectService(RedirectFileDAO('data/redirects.json'), 'https://x.io')
    >>> result = service.save({'title': 'Hello World', 'desc': 'Test **bold**', 'url': 'https://example.com'})
    >>> result.slug, result.short_url, result.is_update
    ('hello-world', 'https://x.io/hello-world', False)
    >>> service.delete('hello-world')
    'hello-world'
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from seoredirects.constants import Defaults, REDIRECT_TYPES
from seoredirects.types import RedirectPayload
from seoredirects.models import RedirectModel
from seoredirects.exceptions import RedirectValidationError
from seoredirects.dao.base import RedirectBaseDAO
from seoredirects.dao.exceptions import DataStoreError, RedirectNotFoundError
from seoredirects.utils.helpers import build_short_url, build_long_url, iso_timestamp, utc_now
from seoredirects.utils.slugs import allocate_slug


logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('title', 'desc', 'url')
OPTIONAL_FIELDS = ('image', 'video', 'keywords', 'site_name', 'type')

NOT_PERSISTED_WARNING = 'Redirect created but not persisted due to storage restrictions'


def _clean(value: Any) -> str:
    return '' if value is None else str(value).strip()


@dataclass(frozen=True)
class SaveResult:
    """Outcome of a create/update request.

    `persisted` is False when the data store rejected the write; the URLs are
    still valid since the long URL doesn't depend on storage.
    """

    slug: str
    redirect: RedirectModel
    short_url: str
    long_url: str
    is_update: bool
    warning: str | None = None

    @property
    def persisted(self) -> bool:
        return self.warning is None

    def to_response(self) -> dict[str, Any]:
        body = {
            'long': self.long_url,
            'short': self.short_url,
            'slug': self.slug,
            'success': True,
            'isUpdate': self.is_update,
            'data': self.redirect.to_dict(),
        }
        if self.warning:
            body['warning'] = self.warning
        return body


class RedirectService:
    """Create, update, read and delete redirects through a DAO

    Attributes:
        dao (RedirectBaseDAO):
            Storage backend holding the slug -> redirect mapping.
        base_url (str):
            Public base URL used to build short and long URLs.
    """

    def __init__(self, dao: RedirectBaseDAO, base_url: str = Defaults.BASE_URL):
        self.dao = dao
        self.base_url = base_url.rstrip('/')

    def short_url(self, slug: str) -> str:
        return build_short_url(self.base_url, slug)

    def long_url(self, redirect: RedirectModel) -> str:
        return build_long_url(self.base_url, redirect)

    def get(self, slug: str) -> RedirectModel | None:
        return self.dao.get(slug)

    def get_all(self) -> dict[str, RedirectModel]:
        return self.dao.get_all()

    def save(self, payload: RedirectPayload, now: datetime | None = None) -> SaveResult:
        """Create a redirect, or update it when the payload names an existing slug

        Args:
            payload (dict):
                Redirect fields (`title`, `desc`, `url` required) plus an optional `slug`.
            now (datetime | None):
                Moment of the request. Defaults to the current UTC time.

        Returns:
            SaveResult: final slug, stored record and URLs.

        Raises:
            RedirectValidationError:
                If `title`, `desc` or `url` is missing or blank.
        """
        now = now or utc_now()
        values = {name: _clean(payload.get(name)) for name in REQUIRED_FIELDS + OPTIONAL_FIELDS}

        missing = tuple(name for name in REQUIRED_FIELDS if not values[name])
        if missing:
            raise RedirectValidationError('Title, description, and URL are required', fields=missing)

        values['type'] = values['type'] or Defaults.REDIRECT_TYPE
        if values['type'] not in REDIRECT_TYPES:
            logger.info('Saving redirect with a non-standard content type.', extra={'type': values['type']})

        candidate = _clean(payload.get('slug'))
        existing = self.dao.get(candidate) if candidate else None
        is_update = existing is not None

        if is_update:
            slug = candidate
        else:
            slug = allocate_slug(candidate, values['title'], exists=lambda s: self.dao.get(s) is not None, now=now)

        timestamp = iso_timestamp(now)
        created_at = (existing.created_at or timestamp) if is_update else timestamp
        redirect = RedirectModel(**values).with_timestamps(created_at=created_at, updated_at=timestamp)

        warning = None
        try:
            self.dao.save(slug, redirect)
        except DataStoreError:
            logger.exception(
                'Failed to persist redirect. Returning URLs without persistence.',
                extra={'event': 'REDIRECT_NOT_PERSISTED', 'slug': slug},
            )
            warning = NOT_PERSISTED_WARNING
        else:
            logger.info(
                f'Successfully {"updated" if is_update else "created"} redirect.',
                extra={'event': 'REDIRECT_UPDATED' if is_update else 'REDIRECT_CREATED', 'slug': slug},
            )

        return SaveResult(
            slug=slug,
            redirect=redirect,
            short_url=self.short_url(slug),
            long_url=self.long_url(redirect),
            is_update=is_update,
            warning=warning,
        )

    def delete(self, slug: str | None) -> str:
        """Delete a redirect by slug and return the deleted slug

        Raises:
            RedirectValidationError:
                If the slug is missing or blank.
            RedirectNotFoundError:
                If no redirect is stored under the slug.
            DataStoreError:
                If the data store can't be written.
        """
        slug = _clean(slug)
        if not slug:
            raise RedirectValidationError('Valid slug is required as query parameter', fields=('slug',))

        if not self.dao.delete(slug):
            raise RedirectNotFoundError(f'Redirect "{slug}" not found')

        logger.info('Deleted redirect.', extra={'event': 'REDIRECT_DELETED', 'slug': slug})
        return slug
