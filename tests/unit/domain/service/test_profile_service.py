"""Unit tests for ProfileService."""

from uuid import uuid4

import pytest

from skillsphere.domain.error import NotFoundError, ValidationError
from skillsphere.domain.repository import ProfileRepository
from skillsphere.domain.service import ProfileService
from skillsphere.domain.value import Education, UserId
from tests.conftest import make_profile
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestGetById:
    """Tests for get_by_id."""

    @pytest.mark.asyncio
    async def test_returns_existing_profile(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)
        profile_service = await unit_env.get(ProfileService)
        profile = await profile_repo.save(make_profile("Priya", ["Frontend"]))

        result = await profile_service.get_by_id(profile.id)

        assert result == profile

    @pytest.mark.asyncio
    async def test_missing_profile_raises_not_found(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError):
            await profile_service.get_by_id(UserId(uuid4()))


class TestListCandidates:
    """Tests for list_candidates."""

    @pytest.mark.asyncio
    async def test_excludes_viewer_and_keeps_signup_order(self, unit_env):
        # Arrange
        profile_repo = await unit_env.get(ProfileRepository)
        profile_service = await unit_env.get(ProfileService)
        viewer = await profile_repo.save(make_profile("Viewer", ["Frontend"]))
        first = await profile_repo.save(make_profile("First", ["Backend"]))
        second = await profile_repo.save(make_profile("Second", ["UI/UX"]))

        # Act
        candidates = await profile_service.list_candidates(viewer.id)

        # Assert
        assert [c.id for c in candidates] == [first.id, second.id]


class TestUpdateProfile:
    """Tests for update_profile."""

    @pytest.mark.asyncio
    async def test_updates_only_given_fields(self, unit_env):
        # Arrange
        profile_repo = await unit_env.get(ProfileRepository)
        profile_service = await unit_env.get(ProfileService)
        profile = await profile_repo.save(
            make_profile("Priya", ["Frontend"], Education.BTECH)
        )

        # Act
        updated = await profile_service.update_profile(
            profile.id, education=Education.MTECH
        )

        # Assert
        assert updated.education == Education.MTECH
        assert updated.name == "Priya"
        assert updated.skills == ["Frontend"]
        assert (await profile_repo.find_by_id(profile.id)).education == Education.MTECH

    @pytest.mark.asyncio
    async def test_skills_are_trimmed_and_deduplicated(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)
        profile_service = await unit_env.get(ProfileService)
        profile = await profile_repo.save(make_profile("Priya", []))

        updated = await profile_service.update_profile(
            profile.id, skills=[" Backend", "Frontend ", "Backend"]
        )

        assert updated.skills == ["Backend", "Frontend"]

    @pytest.mark.asyncio
    async def test_blank_skill_is_rejected(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)
        profile_service = await unit_env.get(ProfileService)
        profile = await profile_repo.save(make_profile("Priya", ["Frontend"]))

        with pytest.raises(ValidationError):
            await profile_service.update_profile(profile.id, skills=["   "])

        assert (await profile_repo.find_by_id(profile.id)).skills == ["Frontend"]

    @pytest.mark.asyncio
    async def test_blank_name_is_rejected(self, unit_env):
        profile_repo = await unit_env.get(ProfileRepository)
        profile_service = await unit_env.get(ProfileService)
        profile = await profile_repo.save(make_profile("Priya", ["Frontend"]))

        with pytest.raises(ValidationError):
            await profile_service.update_profile(profile.id, name="  ")

    @pytest.mark.asyncio
    async def test_unknown_profile_raises_not_found(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError):
            await profile_service.update_profile(UserId(uuid4()), name="Ghost")
