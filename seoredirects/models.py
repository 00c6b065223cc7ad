from dataclasses import dataclass, asdict, fields, replace
from typing import Any

from seoredirects.constants import Defaults


@dataclass(frozen=True)
class RedirectModel:
    """Represent the stored metadata of one redirect slug.

    The slug itself is not part of the record: it is the key under which the
    record is stored.

    Example:
        >>> redirect = RedirectModel(
        ...     title='Hello World',
        ...     desc='Test **bold**',
        ...     url='https://example.com',
        ... )
        >>> redirect.type
        'website'
        >>> redirect.to_dict()['created_at']
        ''
    """

    # fmt: off
    title: str                               # Human-readable title
    desc: str                                # Markdown description
    url: str                                 # Target destination (absolute URL)
    type: str = Defaults.REDIRECT_TYPE       # Open Graph content type label
    image: str = ''                          # Optional preview image (absolute URL)
    video: str = ''                          # Optional preview video (absolute URL)
    keywords: str = ''                       # Comma-separated keywords
    site_name: str = ''                      # Optional Open Graph site name
    created_at: str = ''                     # ISO-8601, set once on creation
    updated_at: str = ''                     # ISO-8601, refreshed on every save
    # fmt: on

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'RedirectModel':
        """Build a record from a stored or submitted mapping.

        Unknown keys (e.g. `slug` in table items) are ignored, missing optional
        fields become empty strings and `None` values are treated as missing.
        """
        values = {}
        for field in fields(cls):
            value = data.get(field.name)
            if value is not None:
                values[field.name] = str(value)
        values.setdefault('title', '')
        values.setdefault('desc', '')
        values.setdefault('url', '')
        if not values.get('type'):
            values['type'] = Defaults.REDIRECT_TYPE
        return cls(**values)

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    def with_timestamps(self, created_at: str, updated_at: str) -> 'RedirectModel':
        return replace(self, created_at=created_at, updated_at=updated_at)
