"""Profile repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from skillsphere.domain.model.profile import Profile
from skillsphere.domain.value import UserId


class ProfileRepository(ABC):
    """Repository for user profiles."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Profile | None:
        """Find a profile by user ID."""
        pass

    @abstractmethod
    async def list_profiles_by_ids(self, ids: Iterable[UserId]) -> dict[UserId, Profile]:
        """Load many profiles in a single round-trip.

        Unknown IDs are simply absent from the result.

        Raises:
            TransientError: If the store is unavailable
        """
        pass

    @abstractmethod
    async def list_candidates(self, exclude_id: UserId) -> list[Profile]:
        """List every profile except ``exclude_id``, oldest account first."""
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Create or update a profile."""
        pass
