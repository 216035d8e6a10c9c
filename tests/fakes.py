"""Stateful in-memory stand-in for AccountRepository.

Used where a test needs the store to remember earlier writes (limit
scenarios, cache invalidation). Call-level assertions use AsyncMock instead.
"""

import uuid
from typing import Any

from sqlalchemy.exc import OperationalError

from src.sa_account.domain.models import SavingsAccount
from src.sa_common.errors import AccountNumberConflictError


def db_down(message: str = "DB connection lost") -> OperationalError:
    return OperationalError("SELECT 1", {}, Exception(message))


class FakeAccountRepository:
    def __init__(self) -> None:
        self.accounts: dict[str, SavingsAccount] = {}
        self.fail_on: dict[str, Exception] = {}

    def _check(self, operation: str) -> None:
        exc = self.fail_on.get(operation)
        if exc is not None:
            raise exc

    async def find_by_account_number(
        self, db: Any, account_number: str
    ) -> SavingsAccount | None:
        self._check("find_by_account_number")
        for account in self.accounts.values():
            if account.account_number == account_number:
                return account
        return None

    async def count_by_customer_name(self, db: Any, customer_name: str) -> int:
        self._check("count_by_customer_name")
        return sum(1 for a in self.accounts.values() if a.customer_name == customer_name)

    async def insert(
        self,
        db: Any,
        account_number: str,
        customer_name: str,
        account_nickname: str | None,
    ) -> SavingsAccount:
        self._check("insert")
        if any(a.account_number == account_number for a in self.accounts.values()):
            raise AccountNumberConflictError(account_number)
        account = SavingsAccount(
            id=str(uuid.uuid4()),
            account_number=account_number,
            customer_name=customer_name,
            account_nickname=account_nickname,
        )
        self.accounts[account.id] = account
        return account

    async def exists_by_id(self, db: Any, account_id: str) -> bool:
        self._check("exists_by_id")
        return account_id in self.accounts

    async def delete_by_id(self, db: Any, account_id: str) -> bool:
        self._check("delete_by_id")
        return self.accounts.pop(account_id, None) is not None

    async def find_all(self, db: Any) -> list[SavingsAccount]:
        self._check("find_all")
        return list(self.accounts.values())


class FakeRedis:
    """Hash-backed stand-in for the redis.asyncio calls the cache makes."""

    def __init__(self) -> None:
        self.hashes: dict[str, dict[str, str]] = {}
        self.fail_on: dict[str, Exception] = {}

    def _check(self, command: str) -> None:
        exc = self.fail_on.get(command)
        if exc is not None:
            raise exc

    async def hget(self, name: str, key: str) -> str | None:
        self._check("hget")
        return self.hashes.get(name, {}).get(key)

    async def hset(self, name: str, key: str, value: str) -> int:
        self._check("hset")
        self.hashes.setdefault(name, {})[key] = value
        return 1

    async def delete(self, *names: str) -> int:
        self._check("delete")
        return sum(1 for name in names if self.hashes.pop(name, None) is not None)
