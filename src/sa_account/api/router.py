"""sa_account REST API: create, get by number, list, delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from src.sa_account.application.schemas import AccountResponse, CreateAccountRequest
from src.sa_account.application.service import SavingsAccountService
from src.sa_common.database import get_db_session

router = APIRouter(prefix="/accounts", tags=["accounts"])


def get_account_service(request: Request) -> SavingsAccountService:
    """The service instance is built once in the application lifespan."""
    return request.app.state.account_service  # type: ignore[no-any-return]


ServiceDep = Annotated[SavingsAccountService, Depends(get_account_service)]
SessionDep = Annotated[AsyncSession, Depends(get_db_session)]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=AccountResponse,
    summary="Create a savings account",
)
async def create_account(
    body: CreateAccountRequest,
    service: ServiceDep,
    db: SessionDep,
) -> AccountResponse:
    # customer_name is never None once the request model has validated
    account = await service.create_account(
        db, body.customer_name or "", body.account_nickname
    )
    return AccountResponse.from_domain(account)


@router.get(
    "/{account_number}",
    response_model=AccountResponse,
    summary="Get an account by account number",
)
async def get_account(
    account_number: str,
    service: ServiceDep,
    db: SessionDep,
) -> AccountResponse:
    account = await service.get_account(db, account_number)
    return AccountResponse.from_domain(account)


@router.get(
    "",
    response_model=list[AccountResponse],
    summary="List all accounts",
)
async def list_accounts(
    service: ServiceDep,
    db: SessionDep,
) -> list[AccountResponse]:
    accounts = await service.list_accounts(db)
    return [AccountResponse.from_domain(a) for a in accounts]


@router.delete(
    "/{account_id}",
    response_class=PlainTextResponse,
    summary="Delete an account by id",
)
async def delete_account(
    account_id: str,
    service: ServiceDep,
    db: SessionDep,
) -> PlainTextResponse:
    deleted_id = await service.delete_account(db, account_id)
    return PlainTextResponse(deleted_id)
