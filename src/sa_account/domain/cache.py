"""Account read cache contract.

  - Cache key for a single account: its account number
  - Cache key for the full listing: ALL_ACCOUNTS_KEY
  - Read: cache-aside (check cache → DB on miss → populate cache)
  - Write: DB first, then invalidate every entry (no per-key eviction)

No TTL and no capacity policy; entries live until the next write.
"""

from typing import Protocol

from src.sa_account.domain.models import SavingsAccount

ALL_ACCOUNTS_KEY = "allAccounts"


class AccountCacheProtocol(Protocol):
    async def get_account(self, account_number: str) -> SavingsAccount | None: ...

    async def put_account(self, account: SavingsAccount) -> None: ...

    async def get_all(self) -> list[SavingsAccount] | None: ...

    async def put_all(self, accounts: list[SavingsAccount]) -> None: ...

    async def invalidate_all(self) -> None: ...
