"""Get teammate matches use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from skillsphere.application.engine import InvitationEngineRegistry
from skillsphere.application.usecase.base import BaseUseCase
from skillsphere.application.usecase.profile.summary import ProfileSummary
from skillsphere.config import MatchingSettings
from skillsphere.domain.model import MatchedProfile
from skillsphere.domain.service import (
    ProfileService,
    build_matches,
    count_high_matches,
    filter_matches,
)
from skillsphere.domain.value import Education, MatchTier, UserId


class GetMatchesRequest(BaseModel):
    """Request for the viewer's teammate matches."""

    viewer_id: str
    search: str | None = Field(default=None, max_length=100)
    education: Education | None = None


class MatchItem(BaseModel):
    """A ranked teammate candidate."""

    profile: ProfileSummary
    match_percentage: int
    common_skills: list[str]
    tier: MatchTier
    already_invited: bool

    @classmethod
    def from_match(cls, match: MatchedProfile) -> "MatchItem":
        return cls(
            profile=ProfileSummary.from_profile(match.profile),
            match_percentage=match.match_percentage,
            common_skills=match.common_skills,
            tier=match.tier,
            already_invited=match.already_invited,
        )


class GetMatchesResponse(BaseModel):
    """Ranked matches after filtering."""

    matches: list[MatchItem]
    total_matches: int  # Before search/education filters
    high_match_count: int  # Among the filtered matches


class GetMatchesUseCase(BaseUseCase):
    """Use case for ranking potential teammates for the viewer."""

    def __init__(
        self,
        profile_service: ProfileService,
        engine_registry: InvitationEngineRegistry,
        matching_settings: MatchingSettings,
    ) -> None:
        """Initialize use case.

        Args:
            profile_service: Profile domain service
            engine_registry: Session invitation engines (for sent invitations)
            matching_settings: Matching configuration
        """
        self.profile_service = profile_service
        self.engine_registry = engine_registry
        self.matching_settings = matching_settings

    async def execute(self, request: GetMatchesRequest) -> GetMatchesResponse:
        """Build the viewer's ranked match list.

        Raises:
            NotFoundError: If the viewer has no profile
        """
        viewer_id = UserId(UUID(request.viewer_id))

        with logfire.span("get_matches", viewer_id=str(viewer_id)):
            viewer = await self.profile_service.get_by_id(viewer_id)
            candidates = await self.profile_service.list_candidates(viewer_id)

            engine = await self.engine_registry.get_engine(viewer_id)
            await engine.wait_for_refresh()

            matches = build_matches(viewer, candidates, engine.sent_invitations)
            filtered = filter_matches(matches, request.search, request.education)
            high_matches = count_high_matches(
                filtered, self.matching_settings.high_match_threshold
            )

            logfire.info(
                "Matches built",
                viewer_id=str(viewer_id),
                candidates=len(candidates),
                matches=len(matches),
                shown=len(filtered),
                high_matches=high_matches,
            )
            return GetMatchesResponse(
                matches=[MatchItem.from_match(m) for m in filtered],
                total_matches=len(matches),
                high_match_count=high_matches,
            )
