"""Shared connection handling for Redis-backed DAOs.

Example:
    >>> class RedirectRedisDAO(RedisClientMixin, RedirectBaseDAO):
    ...     pass
    ...
    >>> dao = RedirectRedisDAO(redis_host='redis.internal', prefix='seoredirects:prod')
    >>> dao.keys.index_key()
    'seoredirects:prod:redirects:index'
"""

import redis

from seoredirects.dao.redis.redis_key_schema import RedisKeySchema
from seoredirects.dao.redis.helpers import connection_info
from seoredirects.dao.exceptions import DataStoreError


class RedisClientMixin:
    """Give a DAO a Redis client (`self.redis`) and a key schema (`self.keys`).

    The connection is checked with a PING on construction, so a DAO that was
    built successfully was reachable at that moment.
    """

    def __init__(
        self,
        redis_host: str = 'localhost',
        redis_port: int = 6379,
        redis_db: int = 0,
        redis_decode_responses: bool = True,
        redis_username: str | None = None,
        redis_password: str | None = None,
        redis_client: redis.Redis | None = None,
        prefix: str | None = None,
    ):
        """Connect to Redis, or adopt `redis_client` when one is given

        Args:
            redis_host, redis_port, redis_db (str, int, int):
                Server address and database index. Ignored when `redis_client` is given.

            redis_decode_responses (bool):
                Return `str` instead of `bytes`. The DAOs expect True.

            redis_username, redis_password (str | None):
                ACL credentials, if the server requires them.

            redis_client (redis.Redis | None):
                Existing client to reuse (e.g. a warm client kept across Lambda invocations).

            prefix (str | None):
                Key namespace, typically '<APP_NAME>:<APP_ENV>'.

        Raises:
            DataStoreError:
                If the server doesn't answer the PING.
        """
        if redis_client is None:
            redis_client = redis.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                decode_responses=redis_decode_responses,
                username=redis_username,
                password=redis_password,
            )

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)

        self._healthcheck()

    def _healthcheck(self, raise_error: bool = True) -> bool:
        """PING the server; return False (or raise DataStoreError if `raise_error`) when unreachable"""
        try:
            self.redis.ping()
        except redis.exceptions.ConnectionError as e:
            if not raise_error:
                return False
            raise DataStoreError(f"Can't connect to Redis at {connection_info(self.redis)}. Check the redis settings in the app config.") from e
        return True
