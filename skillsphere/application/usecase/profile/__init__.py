"""Profile and recommendation use cases."""

from skillsphere.application.usecase.profile.get_recommendations import (
    GetRecommendationsRequest,
    GetRecommendationsResponse,
    GetRecommendationsUseCase,
    RecommendationItem,
)
from skillsphere.application.usecase.profile.summary import ProfileSummary
from skillsphere.application.usecase.profile.update_profile import (
    UpdateProfileRequest,
    UpdateProfileUseCase,
)

__all__ = [
    "GetRecommendationsRequest",
    "GetRecommendationsResponse",
    "GetRecommendationsUseCase",
    "ProfileSummary",
    "RecommendationItem",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
]
