"""Account read cache implementations.

RedisAccountCache keeps every entry of a namespace in ONE Redis hash:

    HSET accounts account:1234567890 '{"id": ..., "account_number": ...}'
    HSET accounts allAccounts '[{...}, {...}]'

Account fields carry the ACCOUNT_FIELD_PREFIX, so no account number can
read back the listing. Invalidating the whole cache is a single DEL,
atomic for all readers.
InMemoryAccountCache is the single-process equivalent (local dev, tests).
"""

import json
import logging

import redis.asyncio as aioredis

from config.settings import Settings
from src.sa_account.domain.cache import ALL_ACCOUNTS_KEY, AccountCacheProtocol
from src.sa_account.domain.models import SavingsAccount

logger = logging.getLogger("sa.cache")

ACCOUNT_FIELD_PREFIX = "account:"


def _account_field(account_number: str) -> str:
    return f"{ACCOUNT_FIELD_PREFIX}{account_number}"


class RedisAccountCache:
    def __init__(self, redis: aioredis.Redis, namespace: str = "accounts") -> None:
        self._redis = redis
        self._namespace = namespace

    async def get_account(self, account_number: str) -> SavingsAccount | None:
        raw = await self._redis.hget(self._namespace, _account_field(account_number))
        if raw is None:
            return None
        return SavingsAccount.from_dict(json.loads(raw))

    async def put_account(self, account: SavingsAccount) -> None:
        await self._redis.hset(
            self._namespace,
            _account_field(account.account_number),
            json.dumps(account.to_dict()),
        )

    async def get_all(self) -> list[SavingsAccount] | None:
        raw = await self._redis.hget(self._namespace, ALL_ACCOUNTS_KEY)
        if raw is None:
            return None
        return [SavingsAccount.from_dict(item) for item in json.loads(raw)]

    async def put_all(self, accounts: list[SavingsAccount]) -> None:
        payload = json.dumps([a.to_dict() for a in accounts])
        await self._redis.hset(self._namespace, ALL_ACCOUNTS_KEY, payload)

    async def invalidate_all(self) -> None:
        await self._redis.delete(self._namespace)


class InMemoryAccountCache:
    def __init__(self) -> None:
        self._accounts: dict[str, SavingsAccount] = {}
        self._all: list[SavingsAccount] | None = None

    async def get_account(self, account_number: str) -> SavingsAccount | None:
        return self._accounts.get(account_number)

    async def put_account(self, account: SavingsAccount) -> None:
        self._accounts[account.account_number] = account

    async def get_all(self) -> list[SavingsAccount] | None:
        return list(self._all) if self._all is not None else None

    async def put_all(self, accounts: list[SavingsAccount]) -> None:
        self._all = list(accounts)

    async def invalidate_all(self) -> None:
        self._accounts.clear()
        self._all = None


def build_account_cache(
    settings: Settings, redis: aioredis.Redis | None = None
) -> AccountCacheProtocol:
    """Pick the cache backend named by settings.CACHE_BACKEND."""
    backend = settings.CACHE_BACKEND.lower()
    if backend == "memory":
        logger.info("Using in-memory account cache")
        return InMemoryAccountCache()
    if backend == "redis":
        if redis is None:
            raise ValueError("CACHE_BACKEND=redis requires a Redis client")
        logger.info("Using Redis account cache (hash %r)", settings.CACHE_NAMESPACE)
        return RedisAccountCache(redis, settings.CACHE_NAMESPACE)
    raise ValueError(f"Unknown CACHE_BACKEND: {settings.CACHE_BACKEND!r}")
