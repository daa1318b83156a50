"""Unit tests for RecommendationService."""

import pytest

from skillsphere.domain.repository import HackathonRepository
from skillsphere.domain.service import RecommendationService
from tests.conftest import make_hackathon, make_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRecommend:
    """Tests for recommend."""

    @pytest.mark.asyncio
    async def test_recommends_open_unenrolled_overlapping_hackathons(self, unit_env):
        # Arrange
        hackathon_repo = await unit_env.get(HackathonRepository)
        service = await unit_env.get(RecommendationService)
        user = make_profile("Priya", ["Frontend", "Backend"])

        upcoming = await hackathon_repo.save(
            make_hackathon("Web Sprint", ["Frontend", "UI/UX"], "Upcoming", 3)
        )
        ongoing = await hackathon_repo.save(
            make_hackathon("API Jam", ["Backend"], "Ongoing", 1)
        )
        await hackathon_repo.save(
            make_hackathon("Old Hack", ["Frontend"], "Completed", -30)
        )
        await hackathon_repo.save(
            make_hackathon("Chain Hack", ["Blockchain"], "Upcoming", 5)
        )
        enrolled = await hackathon_repo.save(
            make_hackathon("Enrolled Hack", ["Backend"], "Upcoming", 2)
        )
        await hackathon_repo.enroll(user.id, enrolled.id)

        # Act
        recommended = await service.recommend(user, limit=6)

        # Assert
        assert [r.hackathon.id for r in recommended] == [ongoing.id, upcoming.id]
        assert recommended[0].match.match_percentage == 100
        assert recommended[1].match.common_skills == ["Frontend"]
        assert recommended[1].match.match_percentage == 50

    @pytest.mark.asyncio
    async def test_respects_limit(self, unit_env):
        hackathon_repo = await unit_env.get(HackathonRepository)
        service = await unit_env.get(RecommendationService)
        user = make_profile("Priya", ["Frontend"])
        for day in range(10):
            await hackathon_repo.save(
                make_hackathon(f"Hack {day}", ["Frontend"], "Upcoming", day + 1)
            )

        recommended = await service.recommend(user, limit=6)

        assert len(recommended) == 6
        assert recommended[0].hackathon.title == "Hack 0"

    @pytest.mark.asyncio
    async def test_user_without_skills_gets_nothing(self, unit_env):
        hackathon_repo = await unit_env.get(HackathonRepository)
        service = await unit_env.get(RecommendationService)
        await hackathon_repo.save(make_hackathon("Web Sprint", ["Frontend"]))

        assert await service.recommend(make_profile("Nobody", []), limit=6) == []
