"""In-memory profile repository for testing."""

from collections.abc import Iterable
from typing import Optional

from skillsphere.domain.model.profile import Profile
from skillsphere.domain.repository.profile import ProfileRepository
from skillsphere.domain.value import UserId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[UserId, Profile] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by user ID."""
        return self._profiles.get(user_id)

    async def list_profiles_by_ids(
        self, ids: Iterable[UserId]
    ) -> dict[UserId, Profile]:
        return {
            user_id: self._profiles[user_id]
            for user_id in set(ids)
            if user_id in self._profiles
        }

    async def list_candidates(self, exclude_id: UserId) -> list[Profile]:
        candidates = [p for p in self._profiles.values() if p.id != exclude_id]
        return sorted(candidates, key=lambda p: p.created_at)

    async def save(self, profile: Profile) -> Profile:
        """Save or update a profile."""
        self._profiles[profile.id] = profile
        return profile
