# =============================================================================
# lib/database.py - Async Database Connection
# =============================================================================
# This module wraps the SQLAlchemy async engine and session factory.
# One Database instance is created at application startup and shared by
# every request; the engine owns the connection pool.
#
# Usage:
#   from lib.database import Database
#   database = Database("sqlite+aiosqlite:///./customers.db")
#   await database.create_tables()
#   async with database.session_factory() as session:
#       ...
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from lib.orm import Base

# Set up logging for this module
logger = logging.getLogger(__name__)


class DatabaseError(Exception):
    """
    Error during database operations.

    Provides actionable error messages:
    "Errors should tell HOW to fix, not just WHAT failed."
    """

    def __init__(
        self,
        message: str,
        code: str = "DATABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class RecordNotFoundError(DatabaseError):
    """Raised when an update or delete targets a row that doesn't exist."""

    def __init__(self, table: str, record_id: int):
        super().__init__(
            message=f"No row in {table} with id {record_id}",
            code="RECORD_NOT_FOUND",
            details={"table": table, "id": record_id},
        )


def _is_sqlite_memory(url: str) -> bool:
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")


class Database:
    """
    Async engine + session factory.

    Example:
        database = Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
        await database.create_tables()
        healthy = await database.ping()
        await database.dispose()
    """

    def __init__(self, url: str, echo: bool = False):
        engine_kwargs: dict[str, Any] = {"echo": echo}

        if _is_sqlite_memory(url):
            # Every session must share the single in-memory connection
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        else:
            engine_kwargs["pool_pre_ping"] = True

        try:
            self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        except Exception as e:
            raise DatabaseError(
                message=f"Failed to create database engine: {e}",
                code="ENGINE_INIT_FAILED",
                suggestion="Check DATABASE_URL and that its async driver is installed",
            ) from e

        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            expire_on_commit=False,
        )
        logger.info(f"Database engine created for {self.engine.url.render_as_string(hide_password=True)}")

    async def create_tables(self) -> None:
        """Create all mapped tables that don't exist yet."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ready")

    async def ping(self) -> bool:
        """
        Check connectivity with a trivial query.

        Returns:
            True if SELECT 1 succeeds, False otherwise
        """
        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(text("SELECT 1"))
                return result.scalar() == 1
        except Exception as e:
            logger.warning(f"Database ping failed: {e}")
            return False

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()
        logger.info("Database engine disposed")
