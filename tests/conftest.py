"""Общие фикстуры: БД SQLite в памяти на каждый тест и HTTP-клиент приложения."""

import os

# Настройки читаются при импорте cms, поэтому окружение задается до него
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-session-tokens")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from cms.core.config import settings
from cms.core.db import Base, get_db
from cms.core.security import create_access_token
from cms.db import models  # noqa: F401
from cms.main import app

ALICE_ID = "user-alice"
BOB_ID = "user-bob"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_session_factory):
    """Клиент приложения с подменой зависимости get_db"""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def session_headers():
    """Фабрика заголовков с cookie сессии для заданного пользователя"""
    def make(user_id: str, email: str = None) -> dict:
        token = create_access_token(user_id, email or f"{user_id}@example.com")
        return {"Cookie": f"{settings.session_cookie_name}={token}"}
    return make


@pytest.fixture
def alice(session_headers):
    return session_headers(ALICE_ID)


@pytest.fixture
def bob(session_headers):
    return session_headers(BOB_ID)
