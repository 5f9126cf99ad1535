"""Shared fixtures."""

from __future__ import annotations

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from catalog.core.config import DatabaseSettings, SecuritySettings, Settings
from catalog.core.crypto import PasswordHasher
from catalog.core.security import TokenIssuer
from catalog.db import models  # noqa: F401
from catalog.infrastructure.database import Base
from catalog.infrastructure.database.repositories import SqlAccountRepository
from catalog.main import create_app
from catalog.modules.accounts import AuthService, SessionGuard

from tests.fakes import InMemoryAccountRepository

TEST_SECRET = "test-jwt-secret-for-testing-only"
TEST_EMAIL = "a@x.com"
TEST_PASSWORD = "secret1"


@pytest.fixture
def password_hasher() -> PasswordHasher:
    # Minimum bcrypt cost keeps the suite fast.
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_issuer() -> TokenIssuer:
    return TokenIssuer(secret_key=TEST_SECRET)


@pytest.fixture
def memory_repository() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture
def auth_service(memory_repository, password_hasher, token_issuer) -> AuthService:
    return AuthService(memory_repository, password_hasher, token_issuer)


@pytest.fixture
def session_guard(memory_repository, token_issuer) -> SessionGuard:
    return SessionGuard(memory_repository, token_issuer)


@pytest_asyncio.fixture
async def db_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    session_maker = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session


@pytest.fixture
def account_repository(db_session) -> SqlAccountRepository:
    return SqlAccountRepository(db_session)


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        environment="test",
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}"),
        security=SecuritySettings(secret_key=TEST_SECRET, password_hash_rounds=4),
    )


@pytest.fixture
def test_client(api_settings):
    app = create_app(settings=api_settings)
    with TestClient(app) as client:
        yield client
