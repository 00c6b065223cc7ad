"""Data Access Object (DAO) implementation storing redirects in a single JSON document

The whole slug -> redirect mapping lives in one UTF-8 JSON object on disk,
pretty-printed with 2-space indentation:

    {
      "hello-world": {
        "title": "Hello World",
        "desc": "Test **bold**",
        "url": "https://example.com",
        ...
      }
    }

Every write is a read-modify-write of the whole document without locking, so
concurrent writers may clobber each other's changes. Reads treat an unreadable document
as empty, while writes refuse to replace a document they could not load.

Classes:
    RedirectFileDAO:
        DAO for storing and retrieving RedirectModel in a JSON file.

Example:
    >>> dao = RedirectFileDAO('data/redirects.json')
    >>> dao.save('hello-world', RedirectModel(title='Hello World', desc='d', url='https://example.com'))
    <RedirectFileDAO path='data/redirects.json'>
    >>> list(dao.get_all())
    ['hello-world']
"""

import os
import json
import logging
import tempfile
from pathlib import Path

from beartype import beartype

from seoredirects.types import RedirectDocument
from seoredirects.models import RedirectModel
from seoredirects.dao.base import RedirectBaseDAO
from seoredirects.dao.exceptions import DataStoreError


logger = logging.getLogger(__name__)


class RedirectFileDAO(RedirectBaseDAO):
    """JSON-file-based Data Access Object (DAO) for redirects

    Attributes:
        path (Path):
            Location of the JSON document. Its parent directory is created on the first write.
    """

    def __init__(self, path: str | os.PathLike = 'data/redirects.json'):
        self.path = Path(path)

    def _load(self) -> dict:
        """Load the raw document for a read-modify-write

        A missing file is an empty document. Anything else that can't be read
        raises DataStoreError so that a write never replaces a document it failed to load.
        """
        try:
            with self.path.open('r', encoding='utf-8') as f:
                document = json.load(f)
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise DataStoreError(f"Can't read redirects file at {self.path}.") from e
        except ValueError as e:
            raise DataStoreError(f'Redirects file at {self.path} is not valid JSON.') from e

        if not isinstance(document, dict):
            raise DataStoreError(f'Redirects file at {self.path} does not hold a JSON object.')
        return document

    def _read(self) -> RedirectDocument:
        """Load the document for lookups, treating any unreadable state as empty"""
        try:
            document = self._load()
        except DataStoreError as e:
            logger.warning(
                'Failed to read redirects file. Treating it as empty.',
                extra={'event': 'REDIRECTS_FILE_UNREADABLE', 'path': str(self.path), 'error': str(e)},
            )
            return {}
        return {slug: data for slug, data in document.items() if isinstance(data, dict)}

    def _write(self, document: RedirectDocument) -> None:
        """Replace the document on disk; the previous version survives a failed write"""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f'.{self.path.name}.', suffix='.tmp')
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    json.dump(document, f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, self.path)
            except BaseException:
                Path(tmp_path).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise DataStoreError(f"Can't write redirects file at {self.path}.") from e

    @beartype
    def get(self, slug: str) -> RedirectModel | None:
        data = self._read().get(slug)
        return RedirectModel.from_dict(data) if data is not None else None

    @beartype
    def get_all(self) -> dict[str, RedirectModel]:
        return {slug: RedirectModel.from_dict(data) for slug, data in self._read().items()}

    @beartype
    def save(self, slug: str, redirect: RedirectModel) -> 'RedirectFileDAO':
        document = self._load()
        document[slug] = redirect.to_dict()
        self._write(document)
        return self

    @beartype
    def delete(self, slug: str) -> bool:
        document = self._load()
        if slug not in document:
            return False

        del document[slug]
        self._write(document)
        return True

    def __repr__(self) -> str:
        return f'<RedirectFileDAO path={str(self.path)!r}>'
