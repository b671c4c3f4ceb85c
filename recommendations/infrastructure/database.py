"""Database Session Manager - async engine, per-request sessions, startup schema.

Invariants:
    - A failed unit of work is rolled back before the session is closed
    - SQLAlchemy failures surface as DatabaseError (core/errors.py); nothing else is wrapped
    - db_manager is None until init_db runs in the FastAPI lifespan

Design Decisions:
    - Two failure buckets: a duplicate id (IntegrityError) is a commit problem,
      everything else SQLAlchemy raises is reported as a query problem
    - expire_on_commit=False: repositories map rows to entities after commit
    - create_tables on startup instead of migrations: one table, additive schema
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from recommendations.core.errors import DatabaseError
from recommendations.db.base import Base
import recommendations.models  # noqa: F401  registers tables on Base.metadata

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Owns the engine and hands out sessions for the recommendations table."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
        )
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session; roll back and raise DatabaseError on SQLAlchemy failure."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            operation = "commit" if isinstance(e, IntegrityError) else "query"
            logger.error(
                f"Recommendation {operation} failed: {e}",
                extra={"operation": operation},
            )
            raise DatabaseError(type(e).__name__, operation) from e
        finally:
            await session.close()

    async def create_tables(self) -> None:
        """Create missing tables (idempotent)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
