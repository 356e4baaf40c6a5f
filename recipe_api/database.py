"""
Recipe API - Database Engine & Session Management
===================================================

What:  Async SQLAlchemy engine wrapper, declarative base and FastAPI dependencies.
Why:   Centralizes all database connection logic in one place.
How:   A `Database` object owns the engine and session factory. The application
       factory creates one, stores it on `app.state.database`, and the
       dependencies below pull it from the incoming request. Nothing here is a
       module-level connection, so tests hand `create_app()` their own Database.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Engine is created with the app; sessions are created per-request.

Connection Pooling Strategy:
    Server databases (PostgreSQL via asyncpg) get a sized queue pool with
    pre-ping and hourly recycling. SQLite ignores pool sizing; in-memory SQLite
    uses a StaticPool so every session sees the same database.
"""

import logging
from typing import AsyncGenerator, Optional

from fastapi import Depends, Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from recipe_api.config import settings
from recipe_api.gateway import PersistenceGateway

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object so `Database.create_schema()` sees every table.
    """
    pass


class Database:
    """
    Long-lived handle to the relational datastore.

    Owns the async engine (connection pool) and the session factory. One instance
    lives for the whole process; sessions borrowed from it live for one request.
    """

    def __init__(self, url: Optional[str] = None, echo: Optional[bool] = None):
        self.url = url or settings.database_url
        if echo is None:
            echo = settings.log_level == "DEBUG"

        self.engine: AsyncEngine = create_async_engine(
            self.url, echo=echo, **self._engine_options()
        )

        # expire_on_commit=False: rows stay readable after the write commits
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    def _engine_options(self) -> dict:
        if self.url.startswith("sqlite"):
            # No file path means an in-memory database
            if ":memory:" in self.url or self.url.endswith("://"):
                return {"poolclass": StaticPool}
            return {}
        return {
            "pool_size": settings.db_pool_size,
            "max_overflow": settings.db_max_overflow,
            "pool_pre_ping": settings.db_pool_pre_ping,
            "pool_recycle": 3600,
        }

    async def create_schema(self) -> None:
        """
        Create the `recipes` and `meal_plans` tables if they do not exist.

        Idempotent: `create_all` checks for each table before issuing CREATE TABLE.
        """
        # Register the models with Base.metadata
        from recipe_api.models import meal_plan, recipe  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ready (%s)", ", ".join(sorted(Base.metadata.tables)))

    async def ping(self) -> None:
        """Run SELECT 1; raises if the datastore is unreachable."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """Close all pooled connections (called from the lifespan shutdown hook)."""
        await self.engine.dispose()


# ── Dependencies ──────────────────────────────────────────────────────────
def get_database(request: Request) -> Database:
    """FastAPI dependency returning the Database the app was created with."""
    return request.app.state.database


async def get_db_session(
    database: Database = Depends(get_database),
) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits anything still pending
        4. On error: rolls back and re-raises
        5. Always: closes the session (returns connection to pool)
    """
    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def get_gateway(
    session: AsyncSession = Depends(get_db_session),
) -> PersistenceGateway:
    """FastAPI dependency wrapping the request's session in a PersistenceGateway."""
    return PersistenceGateway(session)
