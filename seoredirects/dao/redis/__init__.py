from seoredirects.dao.redis.redis_key_schema import RedisKeySchema
from seoredirects.dao.redis.mixins import RedisClientMixin
from seoredirects.dao.redis.redirect_redis_dao import RedirectRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'RedirectRedisDAO',
]
