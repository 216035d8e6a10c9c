"""Repository Protocol: dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.sa_account.domain.models import SavingsAccount


class AccountRepositoryProtocol(Protocol):
    async def find_by_account_number(
        self, db: AsyncSession, account_number: str
    ) -> SavingsAccount | None: ...

    async def count_by_customer_name(
        self, db: AsyncSession, customer_name: str
    ) -> int: ...

    async def insert(
        self,
        db: AsyncSession,
        account_number: str,
        customer_name: str,
        account_nickname: str | None,
    ) -> SavingsAccount: ...

    async def exists_by_id(self, db: AsyncSession, account_id: str) -> bool: ...

    async def delete_by_id(self, db: AsyncSession, account_id: str) -> bool: ...

    async def find_all(self, db: AsyncSession) -> list[SavingsAccount]: ...
