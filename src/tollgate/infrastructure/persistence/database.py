"""Database engine, session factory and schema management."""

import logging
from pathlib import Path

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

# Import models to register them with AuthBase.metadata
import tollgate_auth.persistence.sqlalchemy.models  # noqa: F401
from tollgate_auth.persistence.sqlalchemy import AuthBase

logger = logging.getLogger(__name__)


def create_engine(database_url: str) -> AsyncEngine:
    """
    Create the async database engine.

    The engine manages the connection pool and is shared by every
    message handled by the process.

    Parameters
    ----------
    database_url
        SQLAlchemy async URL, e.g. ``postgresql+asyncpg://...``

    Returns
    -------
    AsyncEngine instance
    """
    # Ensure data directory exists for SQLite
    if database_url.startswith("sqlite") and ":memory:" not in database_url:
        db_path = database_url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return create_async_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory bound to ``engine``."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(AuthBase.metadata.create_all)

    logger.info("Database schema is up to date")


async def drop_tables(engine: AsyncEngine) -> None:
    """Drop all database tables (testing and development resets only)."""
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(AuthBase.metadata.drop_all)
