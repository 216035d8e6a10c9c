"""Shared Redis client for the account read cache.

Redis never holds authoritative account state; everything stored there is
derived from PostgreSQL and dropped on every write. The client is created
lazily and verified with PING before it is handed out.
"""

import logging

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from config.settings import settings

logger = logging.getLogger("sa.cache")

_client: aioredis.Redis | None = None


async def get_redis() -> aioredis.Redis:
    """Return the shared client, connecting on first use.

    Raises RedisError (or OSError) if the server does not answer PING; no
    client is kept in that case, so the next call tries again.
    """
    global _client  # noqa: PLW0603
    if _client is None:
        client = aioredis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
            socket_connect_timeout=settings.REDIS_CONNECT_TIMEOUT,
        )
        try:
            await client.ping()
        except (RedisError, OSError):
            await client.aclose()
            raise
        logger.info("Connected to Redis at %s", settings.REDIS_URL)
        _client = client
    return _client


async def close_redis() -> None:
    global _client  # noqa: PLW0603
    if _client is not None:
        await _client.aclose()
        _client = None
