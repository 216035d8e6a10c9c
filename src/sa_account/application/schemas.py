"""Pydantic request/response schemas for sa_account API.

Wire names are camelCase (customerName, accountNumber, ...); Python
attributes stay snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.sa_account.domain.models import SavingsAccount

NICKNAME_MIN_LENGTH = 5
NICKNAME_MAX_LENGTH = 30


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class CreateAccountRequest(_CamelModel):
    # Optional in the type so a missing field reports the same message as a blank one
    customer_name: str | None = Field(default=None, validate_default=True)
    account_nickname: str | None = None

    @field_validator("customer_name")
    @classmethod
    def customer_name_not_blank(cls, v: str | None) -> str:
        if v is None or not v.strip():
            raise ValueError("Customer name is mandatory")
        return v

    @field_validator("account_nickname")
    @classmethod
    def nickname_length(cls, v: str | None) -> str | None:
        if v is not None and not (NICKNAME_MIN_LENGTH <= len(v) <= NICKNAME_MAX_LENGTH):
            raise ValueError(
                f"Account nickname must be between {NICKNAME_MIN_LENGTH} "
                f"and {NICKNAME_MAX_LENGTH} characters"
            )
        return v


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class AccountResponse(_CamelModel):
    id: str
    account_number: str
    customer_name: str
    account_nickname: str | None

    @classmethod
    def from_domain(cls, account: SavingsAccount) -> "AccountResponse":
        return cls(
            id=account.id,
            account_number=account.account_number,
            customer_name=account.customer_name,
            account_nickname=account.account_nickname,
        )
