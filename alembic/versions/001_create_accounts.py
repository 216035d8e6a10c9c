"""001: create accounts table

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE accounts (
            id                  UUID            PRIMARY KEY DEFAULT gen_random_uuid(),
            account_number      VARCHAR(10)     NOT NULL,
            customer_name       VARCHAR(255)    NOT NULL,
            account_nickname    VARCHAR(30),
            created_at          TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT uq_accounts_account_number       UNIQUE (account_number),
            CONSTRAINT ck_accounts_account_number_fmt   CHECK (account_number ~ '^1[0-9]{9}$'),
            CONSTRAINT ck_accounts_nickname_len
                CHECK (account_nickname IS NULL OR LENGTH(account_nickname) BETWEEN 5 AND 30)
        );
    """)
    op.execute("CREATE INDEX ix_accounts_customer_name ON accounts (customer_name);")
    op.execute("COMMENT ON TABLE accounts IS 'Savings accounts, immutable after insert';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS accounts CASCADE;")
