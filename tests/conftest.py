"""Shared fixtures: temporary SQLite database, in-memory blob store, HTTP client."""

from collections.abc import AsyncGenerator
from typing import Any, Callable, Dict

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

import app.db.models  # noqa: F401
from app.core.db import get_db, install_unicode_lower
from app.db.base import Base
from app.db.repositories.user_repository import UserRepository
from app.domains.identity.entities import User
from app.infrastructure.storage.factory import get_blob_store
from app.infrastructure.storage.memory import InMemoryBlobStore
from app.main import app

PDF_BYTES = b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\n%%EOF\n"


@pytest_asyncio.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Файловая SQLite база на каждый тест."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'annotator.db'}",
        poolclass=NullPool,
        echo=False,
    )
    install_unicode_lower(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> sessionmaker:
    return sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory: sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def blob_store() -> InMemoryBlobStore:
    return InMemoryBlobStore(key_prefix="test-prefix")


@pytest_asyncio.fixture
async def make_user(session: AsyncSession) -> Callable[..., Any]:
    """Фабрика пользователей, записанных напрямую через репозиторий."""
    repository = UserRepository(session)

    async def _make_user(email: str = "ann@example.com", name: str = "Ann") -> User:
        return await repository.create(User.create_user(name=name, email=email, password="secret"))

    return _make_user


@pytest_asyncio.fixture
async def client(
    session_factory: sessionmaker,
    blob_store: InMemoryBlobStore,
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP клиент поверх приложения с подмененными БД и хранилищем."""

    async def override_get_db():
        async with session_factory() as db_session:
            yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_blob_store] = lambda: blob_store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def register(client: AsyncClient) -> Callable[..., Any]:
    """Регистрирует пользователя через API и возвращает заголовок авторизации."""

    async def _register(
        email: str = "ann@example.com",
        name: str = "Ann",
        password: str = "secret",
    ) -> Dict[str, str]:
        response = await client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _register


@pytest.fixture
def upload(client: AsyncClient) -> Callable[..., Any]:
    """Загружает PDF через API и возвращает external_id."""

    async def _upload(
        headers: Dict[str, str],
        filename: str = "notes.pdf",
        content: bytes = PDF_BYTES,
    ) -> str:
        response = await client.post(
            "/api/pdfs/upload",
            files={"pdf": (filename, content, "application/pdf")},
            headers=headers,
        )
        assert response.status_code == 201, response.text
        return response.json()["external_id"]

    return _upload


@pytest.fixture
def pdf_bytes() -> bytes:
    return PDF_BYTES
