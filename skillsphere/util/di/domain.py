"""Domain layer DI providers."""

from dishka import Scope, provide

from skillsphere.config import AuthSettings
from skillsphere.domain.repository import HackathonRepository, ProfileRepository
from skillsphere.domain.service import (
    JWTService,
    ProfileService,
    RecommendationService,
)
from skillsphere.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services are REQUEST-scoped and cheap; the repositories they wrap are
    APP-scoped and open their own short transactions.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_profile_service(
        self, profile_repository: ProfileRepository
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(profile_repository=profile_repository)

    @provide
    def get_recommendation_service(
        self, hackathon_repository: HackathonRepository
    ) -> RecommendationService:
        """Provide hackathon recommendation domain service."""
        return RecommendationService(hackathon_repository=hackathon_repository)
