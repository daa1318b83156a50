"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .match_list_builder import build_matches, count_high_matches, filter_matches
from .profile_service import ProfileService
from .recommendation_service import RecommendationService
from .skill_matcher import compute_match, round_half_up

__all__ = [
    "JWTService",
    "ProfileService",
    "RecommendationService",
    "Service",
    "build_matches",
    "compute_match",
    "count_high_matches",
    "filter_matches",
    "round_half_up",
]
