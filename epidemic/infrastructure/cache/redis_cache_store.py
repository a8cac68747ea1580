from contextlib import contextmanager
from typing import Iterator

import redis
from redis.exceptions import RedisError

from epidemic.application.port.cache_store_port import CacheConnectionPort, CacheStorePort
from epidemic.domain.errors import CacheUnavailableError


class RedisCacheConnection(CacheConnectionPort):
    def __init__(self, client: redis.Redis):
        self.client = client

    def get(self, key: str) -> bytes | None:
        try:
            return self.client.get(key)
        except RedisError as exc:
            raise CacheUnavailableError(f"Redis GET {key} failed: {exc}") from exc

    def set(self, key: str, payload: bytes, ttl_seconds: int | None = None) -> None:
        try:
            self.client.set(key, payload, ex=ttl_seconds)
        except RedisError as exc:
            raise CacheUnavailableError(f"Redis SET {key} failed: {exc}") from exc


class RedisCacheStore(CacheStorePort):
    def __init__(self, pool: redis.ConnectionPool):
        self.pool = pool

    @contextmanager
    def connect(self) -> Iterator[RedisCacheConnection]:
        # single_connection_client pins one pooled connection; close() hands it back.
        try:
            client = redis.Redis(connection_pool=self.pool, single_connection_client=True)
        except RedisError as exc:
            raise CacheUnavailableError(f"Redis connection failed: {exc}") from exc
        try:
            yield RedisCacheConnection(client)
        finally:
            client.close()

    def close(self) -> None:
        self.pool.disconnect()
