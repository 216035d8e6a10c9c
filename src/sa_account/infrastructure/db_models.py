"""SQLAlchemy ORM model for sa_account.

Maps to the table created by alembic/versions/001_create_accounts.py.
DO NOT add/remove columns here without a corresponding migration.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, UniqueConstraint, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from src.sa_common.database import Base


class SavingsAccountORM(Base):
    __tablename__ = "accounts"
    __table_args__ = (
        UniqueConstraint("account_number", name="uq_accounts_account_number"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        server_default=text("gen_random_uuid()"),
    )
    account_number: Mapped[str] = mapped_column(String(10), nullable=False)
    customer_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    account_nickname: Mapped[str | None] = mapped_column(String(30), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=text("NOW()")
    )
    # NOTE: No updated_at; accounts are never modified after insert
