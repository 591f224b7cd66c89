"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to StorageError (core/errors.py)
    - SQLite connections run with foreign_keys=ON so ON DELETE CASCADE applies
    - Connection pool uses pool_pre_ping for stale connection detection

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: prevents lazy-load issues in async context
    - Pool sizing only passed for server databases; SQLite picks its own pool class
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from questlines.core.errors import ErrorContext, StorageError
from questlines.db.base import Base
import questlines.models  # noqa: F401  registers tables on Base.metadata

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        if self.engine.dialect.name == "sqlite":
            event.listen(
                self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys,
            )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(
        self, context: ErrorContext | None = None,
    ) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}", extra=_log_extra(context))
            raise StorageError(
                "Integrity constraint violated", "commit", context,
            ) from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}", extra=_log_extra(context))
            raise StorageError(
                "Connection or operational error", "execute", context,
            ) from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}", extra=_log_extra(context))
            raise StorageError("Database driver error", "query", context) from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}", extra=_log_extra(context))
            raise StorageError(
                "Database operation failed", "unknown", context,
            ) from e
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create all tables known to Base.metadata (no-op for existing ones)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for the /up probe)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


def _log_extra(context: ErrorContext | None) -> dict:
    if context is None:
        return {}
    return {"operation": context.operation, "questline_id": context.questline_id}


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


def get_optional_db_manager() -> DatabaseSessionManager | None:
    """FastAPI dependency for probes: None until startup has run."""
    return db_manager


def get_db_manager() -> DatabaseSessionManager:
    """FastAPI dependency for the session manager."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    return db_manager
