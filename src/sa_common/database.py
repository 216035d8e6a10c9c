"""Async SQLAlchemy engine and per-request sessions for the accounts database.

Sessions never commit on their own: SavingsAccountService commits or rolls
back, and a session closed with work still pending is rolled back.
"""

from collections.abc import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from config.settings import Settings, settings


class Base(DeclarativeBase):
    pass


def build_engine(cfg: Settings) -> AsyncEngine:
    return create_async_engine(
        cfg.DATABASE_URL,
        echo=cfg.DEBUG,
        pool_size=cfg.DB_POOL_SIZE,
        max_overflow=cfg.DB_MAX_OVERFLOW,
        pool_pre_ping=True,
    )


engine: AsyncEngine = build_engine(settings)

async_session_factory = async_sessionmaker(engine, expire_on_commit=False)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one AsyncSession per request."""
    async with async_session_factory() as session:
        yield session


async def ping_database() -> None:
    """Run SELECT 1; raises if PostgreSQL is unreachable."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
