"""PostgreSQL implementation of Invitation repository."""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from sqlalchemy import insert, or_, select, update
from sqlalchemy.exc import IntegrityError

from skillsphere.domain.error import (
    ConflictError,
    InvalidTransitionError,
    NotFoundError,
)
from skillsphere.domain.model import Invitation
from skillsphere.domain.repository import (
    ChangeListener,
    ChangeSubscription,
    InvitationRepository,
)
from skillsphere.domain.value import HackathonId, InvitationId, InvitationStatus, UserId
from skillsphere.persistence.change_feed import PostgresInvitationChangeFeed
from skillsphere.persistence.mappers import row_to_invitation
from skillsphere.persistence.repository.base import (
    FOREIGN_KEY_VIOLATION,
    UNIQUE_VIOLATION,
    PostgresRepository,
    sqlstate,
)
from skillsphere.persistence.tables import team_invitations_table


class PostgresInvitationRepository(PostgresRepository, InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session_factory, change_feed: PostgresInvitationChangeFeed) -> None:
        """Initialize repository.

        Args:
            session_factory: SQLAlchemy async session factory
            change_feed: Shared LISTEN/NOTIFY feed for team_invitations
        """
        super().__init__(session_factory)
        self.change_feed = change_feed

    async def list_invitations(
        self,
        as_sender: Optional[UserId] = None,
        as_recipient: Optional[UserId] = None,
    ) -> list[Invitation]:
        """List invitations, newest first."""
        stmt = select(team_invitations_table).order_by(
            team_invitations_table.c.created_at.desc()
        )
        if as_sender is not None:
            stmt = stmt.where(team_invitations_table.c.from_user_id == as_sender)
        if as_recipient is not None:
            stmt = stmt.where(team_invitations_table.c.to_user_id == as_recipient)

        async with self.transaction() as session:
            result = await session.execute(stmt)
            rows = result.mappings().all()
        return [row_to_invitation(dict(row)) for row in rows]

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        stmt = select(team_invitations_table).where(
            team_invitations_table.c.id == invitation_id
        )
        async with self.transaction() as session:
            result = await session.execute(stmt)
            row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def create_invitation(
        self,
        from_user_id: UserId,
        to_user_id: UserId,
        hackathon_id: Optional[HackathonId] = None,
        message: Optional[str] = None,
    ) -> Invitation:
        """Insert a pending invitation.

        The unique index on (from_user_id, to_user_id) is the source of truth
        for duplicates; there is no read-before-write.
        """
        now = datetime.now(timezone.utc)
        stmt = (
            insert(team_invitations_table)
            .values(
                id=uuid4(),
                from_user_id=from_user_id,
                to_user_id=to_user_id,
                hackathon_id=hackathon_id,
                status=InvitationStatus.PENDING.value,
                message=message,
                created_at=now,
                updated_at=now,
            )
            .returning(team_invitations_table)
        )

        async with self.transaction() as session:
            try:
                result = await session.execute(stmt)
            except IntegrityError as e:
                code = sqlstate(e)
                if code == UNIQUE_VIOLATION:
                    raise ConflictError(str(from_user_id), str(to_user_id)) from e
                if code == FOREIGN_KEY_VIOLATION:
                    raise NotFoundError("Profile or hackathon", str(to_user_id)) from e
                raise
            row = result.mappings().one()
        return row_to_invitation(dict(row))

    async def update_invitation_status(
        self, invitation_id: InvitationId, status: InvitationStatus
    ) -> Invitation:
        """Set the status with a single guarded UPDATE.

        Only a pending row (or one already carrying ``status``) is updated, so
        of two concurrent responses exactly one changes the row.
        """
        stmt = (
            update(team_invitations_table)
            .where(team_invitations_table.c.id == invitation_id)
            .where(
                or_(
                    team_invitations_table.c.status == InvitationStatus.PENDING.value,
                    team_invitations_table.c.status == status.value,
                )
            )
            .values(status=status.value, updated_at=datetime.now(timezone.utc))
            .returning(team_invitations_table)
        )

        current = None
        async with self.transaction() as session:
            result = await session.execute(stmt)
            row = result.mappings().first()
            if row is None:
                current = (
                    await session.execute(
                        select(team_invitations_table.c.status).where(
                            team_invitations_table.c.id == invitation_id
                        )
                    )
                ).scalar_one_or_none()

        if row is not None:
            return row_to_invitation(dict(row))
        if current is None:
            raise NotFoundError("Invitation", str(invitation_id))
        raise InvalidTransitionError(str(invitation_id), current, status.value)

    async def subscribe_to_changes(
        self, user_id: UserId, on_change: ChangeListener
    ) -> ChangeSubscription:
        """Subscribe through the shared change feed."""
        return await self.change_feed.subscribe(user_id, on_change)
