"""Database Session Manager — async engine, session lifecycle, and error mapping.

Invariants:
    - Every session rolls back on exception (no partial commits leak)
    - SQLAlchemy exceptions become DatabaseError via map_sqlalchemy_error,
      whether raised inside a session block or by a repository query
    - db_manager is None until init_db runs (FastAPI lifespan)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import DBAPIError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from jeep_sales.core.errors import DatabaseError

logger = logging.getLogger(__name__)

# Most specific first: OperationalError is a DBAPIError subclass.
_ERROR_MAP: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (OperationalError, "Connection or operational error", "execute"),
    (DBAPIError, "Database driver error", "query"),
    (SQLAlchemyError, "Database operation failed", "unknown"),
)


def map_sqlalchemy_error(exc: SQLAlchemyError) -> DatabaseError:
    """Translate a SQLAlchemy exception into the catalog's DatabaseError."""
    for exc_type, message, operation in _ERROR_MAP:
        if isinstance(exc, exc_type):
            logger.error(
                f"{exc_type.__name__}: {exc}",
                extra={"error_code": "DATABASE_ERROR"},
            )
            return DatabaseError(message, operation)
    raise TypeError(f"not a SQLAlchemy error: {exc!r}")


class DatabaseSessionManager:
    def __init__(
        self, database_url: str, pool_size: int = 10, max_overflow: int = 5,
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
        async with self._session_factory() as session:
            try:
                yield session
            except SQLAlchemyError as e:
                await session.rollback()
                raise map_sqlalchemy_error(e) from e

    async def health_check(self) -> bool:
        """SELECT 1 round-trip for the readiness probe."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager is not None:
        await db_manager.dispose()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
