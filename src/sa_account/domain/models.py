"""Domain models for sa_account: pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class SavingsAccount:
    id: str                          # UUID assigned by the store at insert
    account_number: str              # '1' + 9 digits, unique
    customer_name: str
    account_nickname: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SavingsAccount":
        return cls(
            id=data["id"],
            account_number=data["account_number"],
            customer_name=data["customer_name"],
            account_nickname=data.get("account_nickname"),
        )
