"""
Database fixtures for store and end-to-end tests.

Two backends:
- ``sqlite_engine``: a file-backed SQLite database in the test's tmp dir.
  File-backed rather than ``:memory:`` so that separate sessions (and
  concurrent operations) see the same data.
- ``postgres_engine``: an ephemeral PostgreSQL via Testcontainers, used by
  tests marked ``@pytest.mark.integration``.

Usage:
    async def test_something(session_maker):
        store = UserStoreSQLAlchemy(session_maker)
        await store.create("a@x.com", "Ann", "hash")
"""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from tollgate.infrastructure.persistence import (
    create_session_maker,
    create_tables,
    drop_tables,
)

# Use same Postgres version as production
POSTGRES_IMAGE = "postgres:16-alpine"


@pytest_asyncio.fixture
async def sqlite_engine(tmp_path):
    """Create a file-backed SQLite engine with all tables."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'tollgate-test.db'}",
        echo=False,
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(sqlite_engine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the SQLite test database."""
    return create_session_maker(sqlite_engine)


@pytest.fixture(scope="session")
def postgres_container():
    """
    Start a PostgreSQL container for the test session.

    The container is shared across all tests in the session. Each test gets
    a clean schema via table drop/create.
    """
    from testcontainers.postgres import PostgresContainer

    with PostgresContainer(POSTGRES_IMAGE) as postgres:
        yield postgres


@pytest_asyncio.fixture
async def postgres_engine(postgres_container):
    """Async engine connected to the test container with a fresh schema."""
    connection_url = postgres_container.get_connection_url()
    # Testcontainers may return postgresql+psycopg2:// or postgresql://
    async_url = connection_url.replace(
        "postgresql+psycopg2://", "postgresql+asyncpg://"
    )
    async_url = async_url.replace("postgresql://", "postgresql+asyncpg://")

    engine = create_async_engine(
        async_url,
        echo=False,
        poolclass=NullPool,  # Avoid connection pool issues in tests
    )
    await drop_tables(engine)
    await create_tables(engine)
    yield engine
    await drop_tables(engine)
    await engine.dispose()
