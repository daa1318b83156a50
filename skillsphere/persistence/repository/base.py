"""Shared helpers for PostgreSQL repositories."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from skillsphere.domain.error import TransientError

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


def sqlstate(error: IntegrityError) -> str | None:
    """SQLSTATE code of the driver error wrapped by ``error``, if any."""
    orig = error.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


class PostgresRepository:
    """Base for repositories that open one short transaction per call."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize repository with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self.session_factory = session_factory

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncSession]:
        """Open a session inside a transaction, committed on exit.

        Driver and connection failures surface as ``TransientError``; domain
        errors raised inside the block pass through after rollback.
        """
        try:
            async with self.session_factory.begin() as session:
                yield session
        except (SQLAlchemyError, OSError) as e:
            raise TransientError(f"Database unavailable: {e}") from e
