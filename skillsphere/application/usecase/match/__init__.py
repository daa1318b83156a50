"""Match use cases."""

from skillsphere.application.usecase.match.get_matches import (
    GetMatchesRequest,
    GetMatchesResponse,
    GetMatchesUseCase,
    MatchItem,
)

__all__ = [
    "GetMatchesRequest",
    "GetMatchesResponse",
    "GetMatchesUseCase",
    "MatchItem",
]
