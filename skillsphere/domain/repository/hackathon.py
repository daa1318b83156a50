"""Hackathon repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from skillsphere.domain.model.hackathon import Hackathon
from skillsphere.domain.value import HackathonId, UserId


class HackathonRepository(ABC):
    """Read access to hackathons and enrollments."""

    @abstractmethod
    async def list_by_status(self, statuses: Iterable[str]) -> list[Hackathon]:
        """List hackathons whose status is one of ``statuses``."""
        pass

    @abstractmethod
    async def list_enrolled_ids(self, user_id: UserId) -> set[HackathonId]:
        """IDs of the hackathons a user is enrolled in."""
        pass
