"""Root conftest — async DB + FastAPI test client shared by every test package.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
    - get_db dependency overridden to use the test database
    - db_manager patched for code that bypasses get_db (readiness check)
    - test_db and context use separate sessions: seeding never shares an identity map
      with the code under test
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from datetime import date  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker  # noqa: E402

import biblioteca.infrastructure.database as db_module  # noqa: E402
from biblioteca.db.base import Base  # noqa: E402
from biblioteca.db.context import LibraryContext  # noqa: E402
from biblioteca.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, create_engine_for_url, get_db,
)
from biblioteca.main import app  # noqa: E402
from biblioteca.models.author import Author  # noqa: E402
from biblioteca.models.book import Book  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    engine = create_engine_for_url(TEST_DATABASE_URL)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def context(test_session_factory):
    """LibraryContext over its own session, as a request would get."""
    async with test_session_factory() as session:
        yield LibraryContext(session)


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_author(test_db):
    """Insert one author directly into the test DB."""
    author = Author(
        name="Autor Test", birth_date=date(1980, 1, 1), nationality="Argentina",
    )
    test_db.add(author)
    await test_db.commit()
    await test_db.refresh(author)
    return author


@pytest.fixture
async def seed_book(test_db, seed_author):
    """Insert one book owned by seed_author."""
    book = Book(
        title="Libro Test",
        description="Descripción Test",
        publication_date=date(2020, 1, 1),
        author_id=seed_author.id,
    )
    test_db.add(book)
    await test_db.commit()
    await test_db.refresh(book)
    return book
