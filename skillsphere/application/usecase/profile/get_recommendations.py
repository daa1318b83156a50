"""Get hackathon recommendations use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from skillsphere.application.usecase.base import BaseUseCase
from skillsphere.config import MatchingSettings
from skillsphere.domain.model import RecommendedHackathon
from skillsphere.domain.service import ProfileService, RecommendationService
from skillsphere.domain.value import UserId, skill_label


class GetRecommendationsRequest(BaseModel):
    """Get recommendations request."""

    user_id: str


class RecommendationItem(BaseModel):
    """A recommended hackathon."""

    hackathon_id: str
    title: str
    status: str
    mode: str
    start_date: datetime
    end_date: datetime
    skills_required: list[str]
    matching_skills: list[str]
    matching_skill_labels: list[str]
    match_percentage: int

    @classmethod
    def from_recommendation(cls, item: RecommendedHackathon) -> "RecommendationItem":
        hackathon = item.hackathon
        return cls(
            hackathon_id=str(hackathon.id),
            title=hackathon.title,
            status=hackathon.status,
            mode=hackathon.mode,
            start_date=hackathon.start_date,
            end_date=hackathon.end_date,
            skills_required=hackathon.skills_required,
            matching_skills=item.match.common_skills,
            matching_skill_labels=[skill_label(s) for s in item.match.common_skills],
            match_percentage=item.match.match_percentage,
        )


class GetRecommendationsResponse(BaseModel):
    """Recommended hackathons."""

    recommendations: list[RecommendationItem]


class GetRecommendationsUseCase(BaseUseCase):
    """Use case for recommending hackathons that fit the user's skills."""

    def __init__(
        self,
        profile_service: ProfileService,
        recommendation_service: RecommendationService,
        matching_settings: MatchingSettings,
    ) -> None:
        self.profile_service = profile_service
        self.recommendation_service = recommendation_service
        self.matching_settings = matching_settings

    async def execute(
        self, request: GetRecommendationsRequest
    ) -> GetRecommendationsResponse:
        """Recommend hackathons for the user.

        Raises:
            NotFoundError: If the user has no profile
        """
        profile = await self.profile_service.get_by_id(UserId(UUID(request.user_id)))
        recommended = await self.recommendation_service.recommend(
            profile, self.matching_settings.recommendation_limit
        )
        return GetRecommendationsResponse(
            recommendations=[
                RecommendationItem.from_recommendation(r) for r in recommended
            ]
        )
