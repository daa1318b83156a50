"""Application layer DI providers."""

from dishka import Scope, provide

from skillsphere.application.engine import InvitationEngineRegistry
from skillsphere.application.usecase.invitation import (
    EndSessionUseCase,
    GetInvitationsUseCase,
    RespondToInvitationUseCase,
    SendInvitationUseCase,
)
from skillsphere.application.usecase.match import GetMatchesUseCase
from skillsphere.application.usecase.profile import (
    GetRecommendationsUseCase,
    UpdateProfileUseCase,
)
from skillsphere.config import MatchingSettings
from skillsphere.domain.service import ProfileService, RecommendationService
from skillsphere.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Match use cases
    @provide(scope=Scope.REQUEST)
    def get_get_matches_use_case(
        self,
        profile_service: ProfileService,
        engine_registry: InvitationEngineRegistry,
        matching_settings: MatchingSettings,
    ) -> GetMatchesUseCase:
        """Provide get matches use case."""
        return GetMatchesUseCase(
            profile_service=profile_service,
            engine_registry=engine_registry,
            matching_settings=matching_settings,
        )

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_get_invitations_use_case(
        self, engine_registry: InvitationEngineRegistry
    ) -> GetInvitationsUseCase:
        """Provide get invitations use case."""
        return GetInvitationsUseCase(engine_registry=engine_registry)

    @provide(scope=Scope.REQUEST)
    def get_send_invitation_use_case(
        self, engine_registry: InvitationEngineRegistry
    ) -> SendInvitationUseCase:
        """Provide send invitation use case."""
        return SendInvitationUseCase(engine_registry=engine_registry)

    @provide(scope=Scope.REQUEST)
    def get_respond_to_invitation_use_case(
        self, engine_registry: InvitationEngineRegistry
    ) -> RespondToInvitationUseCase:
        """Provide respond to invitation use case."""
        return RespondToInvitationUseCase(engine_registry=engine_registry)

    @provide(scope=Scope.REQUEST)
    def get_end_session_use_case(
        self, engine_registry: InvitationEngineRegistry
    ) -> EndSessionUseCase:
        """Provide end session use case."""
        return EndSessionUseCase(engine_registry=engine_registry)

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, profile_service: ProfileService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_get_recommendations_use_case(
        self,
        profile_service: ProfileService,
        recommendation_service: RecommendationService,
        matching_settings: MatchingSettings,
    ) -> GetRecommendationsUseCase:
        """Provide get recommendations use case."""
        return GetRecommendationsUseCase(
            profile_service=profile_service,
            recommendation_service=recommendation_service,
            matching_settings=matching_settings,
        )
