"""Data Access Object (DAO) implementation storing redirects in Redis

Each redirect is a hash `<prefix>:redirects:slug:<slug>` holding the record fields.
A set `<prefix>:redirects:index` tracks every stored slug so that the whole
mapping can be listed without KEYS/SCAN.

Classes:
    RedirectRedisDAO:
        DAO for storing and retrieving RedirectModel in a Redis datastore.

Example:
    >>> dao = RedirectRedisDAO(prefix='seoredirects:dev')
    >>> dao.save('hello-world', RedirectModel(title='Hello World', desc='d', url='https://example.com'))
    <RedirectRedisDAO prefix='seoredirects:dev'>
    >>> dao.get('hello-world').url
    'https://example.com'
"""

import logging

from beartype import beartype

from seoredirects.models import RedirectModel
from seoredirects.dao.base import RedirectBaseDAO
from seoredirects.dao.helpers import degrade_on_error
from seoredirects.dao.redis.mixins import RedisClientMixin
from seoredirects.dao.redis.helpers import handle_redis_connection_error


logger = logging.getLogger(__name__)


class RedirectRedisDAO(RedisClientMixin, RedirectBaseDAO):
    """Redis-based Data Access Object (DAO) for redirects

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.
    """

    @degrade_on_error(lambda: None)
    @handle_redis_connection_error
    @beartype
    def get(self, slug: str) -> RedirectModel | None:
        data = self.redis.hgetall(self.keys.redirect_key(slug))
        return RedirectModel.from_dict(data) if data else None

    @degrade_on_error(dict)
    @handle_redis_connection_error
    @beartype
    def get_all(self) -> dict[str, RedirectModel]:
        slugs = sorted(self.redis.smembers(self.keys.index_key()))
        if not slugs:
            return {}

        with self.redis.pipeline(transaction=False) as pipe:
            for slug in slugs:
                pipe.hgetall(self.keys.redirect_key(slug))
            records = pipe.execute()

        redirects = {}
        for slug, data in zip(slugs, records):
            if not data:
                # Index entry outlived its hash
                logger.warning('Skipping stale slug in Redis index.', extra={'event': 'REDIS_STALE_INDEX_ENTRY', 'slug': slug})
                continue
            redirects[slug] = RedirectModel.from_dict(data)
        return redirects

    @handle_redis_connection_error
    @beartype
    def save(self, slug: str, redirect: RedirectModel) -> 'RedirectRedisDAO':
        """Replace the redirect hash and register the slug in the index

        The commands run in one MULTI/EXEC transaction so the index never
        lists a slug whose hash is half-written.
        """
        redirect_key = self.keys.redirect_key(slug)
        with self.redis.pipeline(transaction=True) as pipe:
            pipe.delete(redirect_key)
            pipe.hset(redirect_key, mapping=redirect.to_dict())
            pipe.sadd(self.keys.index_key(), slug)
            pipe.execute()
        return self

    @handle_redis_connection_error
    @beartype
    def delete(self, slug: str) -> bool:
        with self.redis.pipeline(transaction=True) as pipe:
            pipe.delete(self.keys.redirect_key(slug))
            pipe.srem(self.keys.index_key(), slug)
            deleted, _ = pipe.execute()
        return bool(deleted)

    def __repr__(self) -> str:
        return f'<RedirectRedisDAO prefix={self.keys.prefix!r}>'
