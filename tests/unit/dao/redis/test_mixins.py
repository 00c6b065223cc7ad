import pytest
import redis

from seoredirects.dao.exceptions import DataStoreError
from seoredirects.dao.redis.mixins import RedisClientMixin


class TestRedisClientMixin:
    @pytest.fixture
    def unhealthy_redis_client(self, redis_client: redis.Redis) -> redis.Redis:
        redis_client.ping.side_effect = redis.exceptions.ConnectionError('Connection error')
        return redis_client

    def test_healthcheck_passes_with_healthy_redis(self, redis_client: redis.Redis):
        mixin = RedisClientMixin(redis_client=redis_client, prefix='testapp:test')
        redis_client.ping.assert_called_once()  # initialization performs a healthcheck
        assert mixin.keys.prefix == 'testapp:test'

    def test_healthcheck_fails_with_unhealthy_redis(self, unhealthy_redis_client: redis.Redis):
        with pytest.raises(DataStoreError, match='redis.test:6379/0'):
            RedisClientMixin(redis_client=unhealthy_redis_client, prefix='testapp:test')

    def test_healthcheck_without_raising(self, redis_client: redis.Redis):
        mixin = RedisClientMixin(redis_client=redis_client)
        redis_client.ping.side_effect = redis.exceptions.ConnectionError('Connection error')
        assert mixin._healthcheck(raise_error=False) is False
