"""AccountRepository: concrete implementation of AccountRepositoryProtocol.

Transaction ownership: the CALLER (application service) commits or rolls back.
This layer only flushes, so the store-assigned id is available to the caller.

SQLAlchemy errors are not translated here; the service maps them to
DatabaseOperationError. The one exception is the unique violation on the
account number, which is surfaced as AccountNumberConflictError so the
service can tell a late collision apart from other storage failures.
"""

import uuid

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.sa_account.domain.models import SavingsAccount
from src.sa_account.infrastructure.db_models import SavingsAccountORM
from src.sa_common.errors import AccountNumberConflictError

_ACCOUNT_NUMBER_CONSTRAINT = "uq_accounts_account_number"


def _to_domain(orm: SavingsAccountORM) -> SavingsAccount:
    return SavingsAccount(
        id=str(orm.id),
        account_number=orm.account_number,
        customer_name=orm.customer_name,
        account_nickname=orm.account_nickname,
    )


def _parse_id(account_id: str) -> uuid.UUID | None:
    """Ids are UUIDs; anything else cannot match a row."""
    try:
        return uuid.UUID(account_id)
    except (TypeError, ValueError):
        return None


class AccountRepository:
    """Concrete repository backed by the ``accounts`` table."""

    async def find_by_account_number(
        self, db: AsyncSession, account_number: str
    ) -> SavingsAccount | None:
        result = await db.execute(
            select(SavingsAccountORM).where(
                SavingsAccountORM.account_number == account_number
            )
        )
        orm = result.scalar_one_or_none()
        return _to_domain(orm) if orm is not None else None

    async def count_by_customer_name(
        self, db: AsyncSession, customer_name: str
    ) -> int:
        result = await db.execute(
            select(func.count())
            .select_from(SavingsAccountORM)
            .where(SavingsAccountORM.customer_name == customer_name)
        )
        return int(result.scalar_one())

    async def insert(
        self,
        db: AsyncSession,
        account_number: str,
        customer_name: str,
        account_nickname: str | None,
    ) -> SavingsAccount:
        orm = SavingsAccountORM(
            account_number=account_number,
            customer_name=customer_name,
            account_nickname=account_nickname,
        )
        db.add(orm)
        try:
            await db.flush()  # Get orm.id (server default) without committing
        except IntegrityError as exc:
            if _ACCOUNT_NUMBER_CONSTRAINT in str(exc.orig):
                raise AccountNumberConflictError(account_number) from exc
            raise
        return _to_domain(orm)

    async def exists_by_id(self, db: AsyncSession, account_id: str) -> bool:
        uid = _parse_id(account_id)
        if uid is None:
            return False
        result = await db.execute(
            select(SavingsAccountORM.id).where(SavingsAccountORM.id == uid)
        )
        return result.scalar_one_or_none() is not None

    async def delete_by_id(self, db: AsyncSession, account_id: str) -> bool:
        uid = _parse_id(account_id)
        if uid is None:
            return False
        result = await db.execute(
            delete(SavingsAccountORM).where(SavingsAccountORM.id == uid)
        )
        return bool(result.rowcount)

    async def find_all(self, db: AsyncSession) -> list[SavingsAccount]:
        result = await db.execute(
            select(SavingsAccountORM).order_by(
                SavingsAccountORM.created_at, SavingsAccountORM.id
            )
        )
        return [_to_domain(orm) for orm in result.scalars().all()]
