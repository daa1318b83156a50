"""Profile domain service."""

from datetime import datetime

import logfire
from pydantic import ValidationError as PydanticValidationError

from skillsphere.domain.error import NotFoundError, ValidationError
from skillsphere.domain.model import Profile
from skillsphere.domain.repository import ProfileRepository
from skillsphere.domain.value import Education, SkillName, UserId

from .base import Service


class ProfileService(Service):
    """Domain service for profile reads and owner edits."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def get_by_id(self, user_id: UserId) -> Profile:
        """Get a profile by user ID.

        Raises:
            NotFoundError: If the profile does not exist
        """
        with logfire.span("profile_service.get_by_id", user_id=str(user_id)):
            profile = await self.profile_repository.find_by_id(user_id)
            if not profile:
                logfire.warn("Profile not found", user_id=str(user_id))
                raise NotFoundError("Profile", str(user_id))
            return profile

    async def list_candidates(self, viewer_id: UserId) -> list[Profile]:
        """All profiles other than the viewer's."""
        with logfire.span("profile_service.list_candidates", viewer_id=str(viewer_id)):
            candidates = await self.profile_repository.list_candidates(viewer_id)
            logfire.info(
                "Candidates listed", viewer_id=str(viewer_id), count=len(candidates)
            )
            return candidates

    async def update_profile(
        self,
        user_id: UserId,
        name: str | None = None,
        education: Education | None = None,
        skills: list[str] | None = None,
    ) -> Profile:
        """Update the owner's editable profile fields.

        Skills are trimmed and deduplicated (first occurrence wins).

        Args:
            user_id: Profile owner
            name: New display name
            education: New education level
            skills: Replacement skill list

        Returns:
            Updated profile

        Raises:
            NotFoundError: If the profile does not exist
            ValidationError: If the name is blank or a skill is invalid
        """
        with logfire.span("profile_service.update_profile", user_id=str(user_id)):
            profile = await self.get_by_id(user_id)

            updates: dict = {"updated_at": datetime.now()}
            if name is not None:
                if not name.strip():
                    raise ValidationError("Name must not be blank")
                updates["name"] = name.strip()
            if education is not None:
                updates["education"] = education
            if skills is not None:
                updates["skills"] = self._normalize_skills(skills)

            saved = await self.profile_repository.save(profile.model_copy(update=updates))
            logfire.info(
                "Profile updated",
                user_id=str(user_id),
                fields=sorted(k for k in updates if k != "updated_at"),
            )
            return saved

    @staticmethod
    def _normalize_skills(skills: list[str]) -> list[str]:
        try:
            normalized = [SkillName(skill).root for skill in skills]
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid skill: {e.errors()[0]['msg']}") from e
        return list(dict.fromkeys(normalized))
