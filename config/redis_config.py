import redis

from config.settings import RedisSettings


def create_redis_pool(settings: RedisSettings) -> redis.ConnectionPool:
    """
    Builds the shared connection pool. Connections are opened lazily on first checkout.
    """
    return redis.ConnectionPool.from_url(
        settings.url,
        max_connections=settings.max_connections,
        socket_timeout=settings.socket_timeout,
        socket_connect_timeout=settings.socket_timeout,
    )
