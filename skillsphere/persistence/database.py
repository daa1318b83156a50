"""Async engine and session factory.

Repositories are shared by long-lived invitation engines, so they never hold
a session: every call opens a short one from the factory built here.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from skillsphere.config import Settings

APPLICATION_NAME = "skillsphere-api"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the pooled engine used by the Postgres repositories."""
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        connect_args={"server_settings": {"application_name": APPLICATION_NAME}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions keep loaded rows usable after commit; mappers read them late."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
