"""Profile representation shared by use case responses."""

from pydantic import BaseModel

from skillsphere.domain.model import Profile
from skillsphere.domain.value import Education


class ProfileSummary(BaseModel):
    """Public profile fields."""

    user_id: str
    name: str
    email: str
    education: Education
    skills: list[str]
    avatar_url: str | None = None

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileSummary":
        return cls(
            user_id=str(profile.id),
            name=profile.name,
            email=profile.email,
            education=profile.education,
            skills=profile.skills,
            avatar_url=profile.avatar_url,
        )
