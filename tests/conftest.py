"""Shared test fixtures."""

import random
from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from src.main import app
from src.sa_account.api.router import get_account_service
from src.sa_account.application.service import SavingsAccountService
from src.sa_account.infrastructure.cache import InMemoryAccountCache
from src.sa_common.database import get_db_session
from tests.fakes import FakeAccountRepository


@pytest.fixture
def repo() -> FakeAccountRepository:
    return FakeAccountRepository()


@pytest.fixture
def cache() -> InMemoryAccountCache:
    return InMemoryAccountCache()


@pytest.fixture
def service(repo: FakeAccountRepository, cache: InMemoryAccountCache) -> SavingsAccountService:
    return SavingsAccountService(repo=repo, cache=cache, rng=random.Random(1234))


@pytest.fixture
async def client(service: SavingsAccountService) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client against the app, wired to the in-memory service."""
    db = AsyncMock()

    async def _db_session() -> AsyncGenerator[AsyncMock, None]:
        yield db

    app.dependency_overrides[get_account_service] = lambda: service
    app.dependency_overrides[get_db_session] = _db_session
    # Unhandled errors are turned into 500 responses by the catch-all handler;
    # don't re-raise them into the test.
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
