"""SavingsAccountService: orchestrates the account workflows.

Collaborators are injected at construction: the store (repository), the read
cache and the random source used for account numbers. The request's
AsyncSession is passed per call; writes commit here and roll back on any
failure.

Error contract:
  - validator failures are raised before anything is generated or written
  - any SQLAlchemyError becomes DatabaseOperationError (cause chained, logged)
  - the cache is invalidated only after a successful commit; the write is
    durable by then, so an invalidation failure is logged, not raised
"""

import logging
import random

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.sa_account.domain.account_number import generate_account_number
from src.sa_account.domain.cache import AccountCacheProtocol
from src.sa_account.domain.models import SavingsAccount
from src.sa_account.domain.repository import AccountRepositoryProtocol
from src.sa_account.rules.account_limit import check_account_limit
from src.sa_account.rules.offensive_nickname import check_nickname
from src.sa_common.errors import (
    AccountNotFoundError,
    AccountNumberConflictError,
    AppError,
    DatabaseOperationError,
    ValidationError,
)

logger = logging.getLogger("sa.account")

# Unique violations raised by the insert itself, i.e. a number taken between
# the existence check and the insert. Draws that collide during the existence
# check are retried without limit and do not count here.
MAX_INSERT_CONFLICT_RETRIES = 3


def _db_failure(message: str, exc: Exception) -> DatabaseOperationError:
    logger.error("%s (%s: %s)", message, type(exc).__name__, exc, exc_info=exc)
    return DatabaseOperationError(message)


class SavingsAccountService:
    def __init__(
        self,
        repo: AccountRepositoryProtocol,
        cache: AccountCacheProtocol,
        rng: random.Random,
    ) -> None:
        self._repo = repo
        self._cache = cache
        self._rng = rng

    async def create_account(
        self,
        db: AsyncSession,
        customer_name: str,
        account_nickname: str | None = None,
    ) -> SavingsAccount:
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is mandatory")

        try:
            check_nickname(account_nickname)
            await check_account_limit(self._repo, db, customer_name)
            account = await self._insert_with_unique_number(
                db, customer_name, account_nickname
            )
            await db.commit()
        except AppError:
            await db.rollback()
            raise
        except SQLAlchemyError as exc:
            await db.rollback()
            raise _db_failure("Failed to create account due to database error.", exc) from exc

        await self._invalidate_cache()
        logger.info(
            "Created account %s (id=%s) for customer %r",
            account.account_number,
            account.id,
            account.customer_name,
        )
        return account

    async def get_account(self, db: AsyncSession, account_number: str) -> SavingsAccount:
        cached = await self._cache.get_account(account_number)
        if cached is not None:
            return cached

        try:
            account = await self._repo.find_by_account_number(db, account_number)
        except SQLAlchemyError as exc:
            raise _db_failure("Failed to retrieve account due to database error.", exc) from exc
        if account is None:
            raise AccountNotFoundError("number", account_number)

        await self._cache.put_account(account)
        return account

    async def list_accounts(self, db: AsyncSession) -> list[SavingsAccount]:
        cached = await self._cache.get_all()
        if cached is not None:
            return cached

        try:
            accounts = await self._repo.find_all(db)
        except SQLAlchemyError as exc:
            raise _db_failure(
                "Failed to retrieve all accounts due to database error.", exc
            ) from exc

        await self._cache.put_all(accounts)
        return accounts

    async def delete_account(self, db: AsyncSession, account_id: str) -> str:
        try:
            if not await self._repo.exists_by_id(db, account_id):
                raise AccountNotFoundError("ID", account_id)
            # Another request may delete the row between the two calls
            if not await self._repo.delete_by_id(db, account_id):
                raise AccountNotFoundError("ID", account_id)
            await db.commit()
        except AppError:
            await db.rollback()
            raise
        except SQLAlchemyError as exc:
            await db.rollback()
            raise _db_failure("Failed to delete account due to database error.", exc) from exc

        await self._invalidate_cache()
        logger.info("Deleted account id=%s", account_id)
        return account_id

    async def _invalidate_cache(self) -> None:
        """Drop every cached entry after a committed write.

        A failure is logged, not raised; the write is already committed.
        Entries cached before the write stay visible until the next
        successful invalidation.
        """
        try:
            await self._cache.invalidate_all()
        except Exception:
            logger.exception("Cache invalidation failed after a committed write")

    # ------------------------------------------------------------------
    # Account number allocation
    # ------------------------------------------------------------------

    async def _next_free_account_number(self, db: AsyncSession) -> str:
        while True:
            candidate = generate_account_number(self._rng)
            if await self._repo.find_by_account_number(db, candidate) is None:
                return candidate
            logger.debug("Account number %s already taken, drawing again", candidate)

    async def _insert_with_unique_number(
        self,
        db: AsyncSession,
        customer_name: str,
        account_nickname: str | None,
    ) -> SavingsAccount:
        conflicts = 0
        while True:
            account_number = await self._next_free_account_number(db)
            try:
                return await self._repo.insert(
                    db, account_number, customer_name, account_nickname
                )
            except AccountNumberConflictError as exc:
                conflicts += 1
                await db.rollback()
                logger.warning(
                    "Account number %s taken at insert time (attempt %d)",
                    account_number,
                    conflicts,
                )
                if conflicts > MAX_INSERT_CONFLICT_RETRIES:
                    raise DatabaseOperationError(
                        "Failed to create account due to database error."
                    ) from exc
