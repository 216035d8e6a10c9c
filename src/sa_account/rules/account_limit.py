from sqlalchemy.ext.asyncio import AsyncSession

from src.sa_account.domain.repository import AccountRepositoryProtocol
from src.sa_common.errors import AccountLimitExceededError

MAX_ACCOUNTS_PER_CUSTOMER = 5


def has_room_for_account(existing_count: int) -> bool:
    """True if a customer owning ``existing_count`` accounts may open one more."""
    return existing_count < MAX_ACCOUNTS_PER_CUSTOMER


async def check_account_limit(
    repo: AccountRepositoryProtocol, db: AsyncSession, customer_name: str
) -> None:
    """Raise AccountLimitExceededError(2001) if the customer is already at the cap.

    Blank names pass; they are rejected by the not-blank validation instead.
    The count and the later insert do not share a lock, so concurrent creations
    for the same customer can both pass this check.
    """
    if not customer_name or not customer_name.strip():
        return
    existing = await repo.count_by_customer_name(db, customer_name)
    if not has_room_for_account(existing):
        raise AccountLimitExceededError(MAX_ACCOUNTS_PER_CUSTOMER)
