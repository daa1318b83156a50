"""Invitation engine DI provider."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire

from skillsphere.application.engine import InvitationEngineRegistry
from skillsphere.config import InvitationSettings
from skillsphere.domain.repository import InvitationRepository, ProfileRepository
from skillsphere.util.di.base import ProviderBase


class ProdEngineProvider(ProviderBase):
    """Provides the process-wide registry of per-user invitation engines."""

    @provide(scope=Scope.APP)
    async def get_engine_registry(
        self,
        invitation_repository: InvitationRepository,
        profile_repository: ProfileRepository,
        invitation_settings: InvitationSettings,
    ) -> AsyncIterator[InvitationEngineRegistry]:
        """Provide the engine registry with its idle-session reaper running.

        Every engine is closed on shutdown.
        """
        registry = InvitationEngineRegistry(
            invitation_repository=invitation_repository,
            profile_repository=profile_repository,
            idle_timeout=invitation_settings.session_idle_timeout,
        )
        registry.start_reaper(invitation_settings.session_reap_interval)
        yield registry
        logfire.info("Closing invitation engines", engines=len(registry))
        await registry.close_all()
