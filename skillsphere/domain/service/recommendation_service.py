"""Hackathon recommendation domain service."""

import logfire

from skillsphere.domain.model import Profile, RecommendedHackathon
from skillsphere.domain.repository import HackathonRepository
from skillsphere.domain.service.skill_matcher import compute_match
from skillsphere.domain.value import MatchDenominator

from .base import Service

OPEN_STATUSES = ("Upcoming", "Ongoing")


class RecommendationService(Service):
    """Suggests open hackathons that fit a user's skills."""

    def __init__(self, hackathon_repository: HackathonRepository) -> None:
        """Initialize recommendation service.

        Args:
            hackathon_repository: Hackathon repository
        """
        self.hackathon_repository = hackathon_repository

    async def recommend(self, profile: Profile, limit: int) -> list[RecommendedHackathon]:
        """Recommend open hackathons the user is not enrolled in.

        A hackathon qualifies when it requires at least one of the user's
        skills. The match percentage is the share of the hackathon's required
        skills the user covers. Store order is preserved.

        Args:
            profile: User to recommend for
            limit: Maximum number of recommendations

        Returns:
            Up to ``limit`` recommendations
        """
        with logfire.span(
            "recommendation_service.recommend", user_id=str(profile.id), limit=limit
        ):
            hackathons = await self.hackathon_repository.list_by_status(OPEN_STATUSES)
            enrolled = await self.hackathon_repository.list_enrolled_ids(profile.id)

            recommended: list[RecommendedHackathon] = []
            for hackathon in hackathons:
                if hackathon.id in enrolled:
                    continue
                match = compute_match(
                    profile.skills,
                    hackathon.skills_required,
                    MatchDenominator.CANDIDATE_TOTAL,
                )
                if not match.common_skills:
                    continue
                recommended.append(RecommendedHackathon(hackathon=hackathon, match=match))
                if len(recommended) >= limit:
                    break

            logfire.info(
                "Hackathons recommended",
                user_id=str(profile.id),
                candidates=len(hackathons),
                count=len(recommended),
            )
            return recommended
