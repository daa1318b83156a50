"""In-memory hackathon repository for testing."""

from collections.abc import Iterable

from skillsphere.domain.model.hackathon import Hackathon
from skillsphere.domain.repository.hackathon import HackathonRepository
from skillsphere.domain.value import HackathonId, UserId


class InMemoryHackathonRepository(HackathonRepository):
    """In-memory implementation of HackathonRepository for testing."""

    def __init__(self) -> None:
        self._hackathons: dict[HackathonId, Hackathon] = {}
        self._enrollments: dict[UserId, set[HackathonId]] = {}

    async def list_by_status(self, statuses: Iterable[str]) -> list[Hackathon]:
        wanted = set(statuses)
        matching = [h for h in self._hackathons.values() if h.status in wanted]
        return sorted(matching, key=lambda h: h.start_date)

    async def list_enrolled_ids(self, user_id: UserId) -> set[HackathonId]:
        return set(self._enrollments.get(user_id, set()))

    async def save(self, hackathon: Hackathon) -> Hackathon:
        self._hackathons[hackathon.id] = hackathon
        return hackathon

    async def enroll(self, user_id: UserId, hackathon_id: HackathonId) -> None:
        self._enrollments.setdefault(user_id, set()).add(hackathon_id)
