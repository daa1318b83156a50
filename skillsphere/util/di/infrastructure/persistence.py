"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from skillsphere.config import InvitationSettings, Settings
from skillsphere.domain.repository import (
    HackathonRepository,
    InvitationRepository,
    ProfileRepository,
)
from skillsphere.persistence.change_feed import PostgresInvitationChangeFeed
from skillsphere.persistence.database import create_engine, create_session_factory
from skillsphere.persistence.repository import (
    PostgresHackathonRepository,
    PostgresInvitationRepository,
    PostgresProfileRepository,
)
from skillsphere.util.di.base import ProviderBase
from skillsphere.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL.

    Everything is APP-scoped: invitation engines keep repositories for the
    lifetime of a user session, so repositories hold a session factory rather
    than a request session.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed on shutdown."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide
    async def get_change_feed(
        self, settings: Settings, invitation_settings: InvitationSettings
    ) -> AsyncIterator[PostgresInvitationChangeFeed]:
        """Provide the shared LISTEN/NOTIFY change feed."""
        feed = PostgresInvitationChangeFeed(
            dsn=settings.database.asyncpg_dsn, settings=invitation_settings
        )
        yield feed
        await feed.close()

    @provide
    def get_invitation_repository(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        change_feed: PostgresInvitationChangeFeed,
    ) -> InvitationRepository:
        """Provide Invitation repository."""
        return PostgresInvitationRepository(session_factory, change_feed)

    @provide
    def get_profile_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> ProfileRepository:
        """Provide Profile repository."""
        return PostgresProfileRepository(session_factory)

    @provide
    def get_hackathon_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> HackathonRepository:
        """Provide Hackathon repository."""
        return PostgresHackathonRepository(session_factory)
