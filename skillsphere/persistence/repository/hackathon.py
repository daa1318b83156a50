"""PostgreSQL implementation of Hackathon repository."""

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import select

from skillsphere.domain.model import Hackathon
from skillsphere.domain.repository import HackathonRepository
from skillsphere.domain.value import HackathonId, UserId
from skillsphere.persistence.mappers import row_to_hackathon
from skillsphere.persistence.repository.base import PostgresRepository
from skillsphere.persistence.tables import enrollments_table, hackathons_table


class PostgresHackathonRepository(PostgresRepository, HackathonRepository):
    """PostgreSQL implementation of HackathonRepository."""

    async def list_by_status(self, statuses: Iterable[str]) -> list[Hackathon]:
        """Hackathons in any of ``statuses``, soonest first."""
        stmt = (
            select(hackathons_table)
            .where(hackathons_table.c.status.in_(list(statuses)))
            .order_by(hackathons_table.c.start_date.asc())
        )
        async with self.transaction() as session:
            result = await session.execute(stmt)
            rows = result.mappings().all()
        return [row_to_hackathon(dict(row)) for row in rows]

    async def list_enrolled_ids(self, user_id: UserId) -> set[HackathonId]:
        stmt = select(enrollments_table.c.hackathon_id).where(
            enrollments_table.c.user_id == user_id
        )
        async with self.transaction() as session:
            result = await session.execute(stmt)
            ids = result.scalars().all()
        return {
            HackathonId(value if isinstance(value, UUID) else UUID(value))
            for value in ids
        }
