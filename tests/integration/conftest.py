"""Integration-test fixtures.

All integration tests share a single event loop so that the module-level
SQLAlchemy async engine pool and Redis pool stay valid for the whole
session. The app lifespan runs once; if PostgreSQL (or Redis, with
CACHE_BACKEND=redis) is not reachable every integration test is skipped.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from redis.exceptions import RedisError
from sqlalchemy.exc import SQLAlchemyError

from src.main import app


@pytest_asyncio.fixture(loop_scope="session", scope="session")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Session-scoped async HTTP client against the real stack."""
    lifespan = app.router.lifespan_context(app)
    try:
        await lifespan.__aenter__()
    except (OSError, SQLAlchemyError, RedisError) as exc:
        pytest.skip(f"backing services unavailable: {exc}")

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    await lifespan.__aexit__(None, None, None)
