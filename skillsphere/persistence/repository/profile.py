"""PostgreSQL implementation of Profile repository."""

from collections.abc import Iterable
from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert

from skillsphere.domain.model import Profile
from skillsphere.domain.repository import ProfileRepository
from skillsphere.domain.value import UserId
from skillsphere.persistence.mappers import profile_to_dict, row_to_profile
from skillsphere.persistence.repository.base import PostgresRepository
from skillsphere.persistence.tables import profiles_table


class PostgresProfileRepository(PostgresRepository, ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by user ID.

        Args:
            user_id: User ID to look up

        Returns:
            Profile if found, None otherwise
        """
        stmt = select(profiles_table).where(profiles_table.c.id == user_id)
        async with self.transaction() as session:
            result = await session.execute(stmt)
            row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def list_profiles_by_ids(
        self, ids: Iterable[UserId]
    ) -> dict[UserId, Profile]:
        """Load many profiles with one ``IN`` query."""
        id_list = list(set(ids))
        if not id_list:
            return {}

        stmt = select(profiles_table).where(profiles_table.c.id.in_(id_list))
        async with self.transaction() as session:
            result = await session.execute(stmt)
            rows = result.mappings().all()

        profiles = [row_to_profile(dict(row)) for row in rows]
        return {profile.id: profile for profile in profiles}

    async def list_candidates(self, exclude_id: UserId) -> list[Profile]:
        """All profiles except the viewer's, oldest account first."""
        stmt = (
            select(profiles_table)
            .where(profiles_table.c.id != exclude_id)
            .order_by(profiles_table.c.created_at.asc())
        )
        async with self.transaction() as session:
            result = await session.execute(stmt)
            rows = result.mappings().all()
        return [row_to_profile(dict(row)) for row in rows]

    async def save(self, profile: Profile) -> Profile:
        """Upsert a profile.

        Args:
            profile: Profile to save

        Returns:
            Saved profile
        """
        values = profile_to_dict(profile)
        stmt = insert(profiles_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[profiles_table.c.id],
            set_={
                key: value
                for key, value in values.items()
                if key not in ("id", "created_at")
            },
        )
        async with self.transaction() as session:
            await session.execute(stmt)
        return profile
