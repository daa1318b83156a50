"""Update profile use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from skillsphere.application.usecase.base import BaseUseCase
from skillsphere.application.usecase.profile.summary import ProfileSummary
from skillsphere.domain.service import ProfileService
from skillsphere.domain.value import Education, UserId


class UpdateProfileRequest(BaseModel):
    """Request to edit the caller's own profile."""

    user_id: str  # From auth, never from the body
    name: str | None = Field(default=None, max_length=100)
    education: Education | None = None
    skills: list[str] | None = Field(default=None, max_length=30)


class UpdateProfileUseCase(BaseUseCase):
    """Use case for editing one's own profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize update profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: UpdateProfileRequest) -> ProfileSummary:
        """Apply the requested changes.

        Raises:
            NotFoundError: If the profile does not exist
            ValidationError: If a field is invalid
        """
        profile = await self.profile_service.update_profile(
            UserId(UUID(request.user_id)),
            name=request.name,
            education=request.education,
            skills=request.skills,
        )
        return ProfileSummary.from_profile(profile)
