"""
Database connection and session management.

This module provides async database session management using SQLAlchemy 2.0
with PostgreSQL and asyncpg driver. Implements connection pooling, the
per-request session dependency and the transaction scope used by services.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import AsyncAdaptedQueuePool

from src.core.config import settings
from src.exceptions import PersistenceError

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Database Engine Configuration
# -----------------------------------------------------------------------------


def create_database_engine(database_url: str | None = None) -> AsyncEngine:
    """
    Create async database engine with connection pooling.

    Args:
        database_url: Database URL. If None, uses settings.database_url

    Returns:
        Configured AsyncEngine instance

    Connection Pool Configuration:
        - pool_size: Number of permanent connections (default: 5)
        - max_overflow: Additional connections under load (default: 10)
        - pool_pre_ping: Test connection before use (default: True)
        - pool_recycle: Recycle connections after N seconds (default: 3600)

    SQLite URLs (local runs) get the dialect's default pool and no
    server settings.
    """
    url = database_url or settings.database_url_str

    logger.info("Initializing database engine...")

    if url.startswith("sqlite"):
        engine = create_async_engine(url, echo=settings.debug)
        logger.info("Database engine created for SQLite")
        return engine

    engine = create_async_engine(
        url,
        echo=settings.debug,  # Log SQL queries in debug mode
        echo_pool=settings.debug,  # Log connection pool events in debug mode
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=settings.db_pool_pre_ping,
        pool_recycle=settings.db_pool_recycle,
        poolclass=AsyncAdaptedQueuePool,
        pool_timeout=settings.db_pool_timeout,
        connect_args={
            "server_settings": {
                "application_name": f"{settings.app_name} - {settings.environment}",
            },
        },
    )

    logger.info(
        f"Database engine created: pool_size={settings.db_pool_size}, "
        f"max_overflow={settings.db_max_overflow}"
    )

    return engine


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory shared by all requests."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


# -----------------------------------------------------------------------------
# Sessions and Transactions
# -----------------------------------------------------------------------------


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding one database session per request.

    The session factory is created by the application lifespan and stored
    in app.state.sessionmaker. Uncommitted work is rolled back when the
    session closes.

    Usage:
        @router.get("/items")
        async def list_items(db: AsyncSession = Depends(get_db)):
            ...
    """
    sessionmaker = request.app.state.sessionmaker
    async with sessionmaker() as session:
        yield session


@asynccontextmanager
async def transaction_scope(session: AsyncSession) -> AsyncIterator[AsyncSession]:
    """
    Run a unit of work and commit it, or roll everything back.

    Every write issued inside the block is committed together when the block
    exits normally. Any exception rolls the whole session back; database
    errors are re-raised as PersistenceError so callers never see a partial
    write.

    Example:
        async with transaction_scope(session):
            account.balance = new_balance
            await account_repo.update(account)
            await journal_repo.append(entry)
    """
    try:
        yield session
        await session.commit()
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error(f"Transaction rolled back: {e}", exc_info=True)
        raise PersistenceError() from e
    except Exception:
        await session.rollback()
        raise


# -----------------------------------------------------------------------------
# Health Checks & Lifecycle Management
# -----------------------------------------------------------------------------


async def check_database_connection(
    sessionmaker: async_sessionmaker[AsyncSession] | None,
) -> bool:
    """
    Check that the database answers a trivial query.

    Args:
        sessionmaker: Session factory from app.state (None before startup)

    Returns:
        True if the database is reachable, False otherwise
    """
    if sessionmaker is None:
        return False

    try:
        async with sessionmaker() as session:
            await session.execute(text("SELECT 1"))
        return True
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Database health check failed: {e}")
        return False


async def close_database_connection(engine: AsyncEngine) -> None:
    """
    Close database engine and dispose of connection pool.

    Should be called on application shutdown to gracefully close
    all database connections.

    Args:
        engine: The AsyncEngine to dispose
    """
    try:
        await engine.dispose()
        logger.info("Database engine disposed successfully")
    except Exception as e:
        logger.error(f"Error disposing database engine: {e}")
        # Don't raise - we're shutting down anyway
