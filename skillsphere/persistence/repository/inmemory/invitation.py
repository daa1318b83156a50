"""In-memory invitation repository for testing."""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from skillsphere.domain.error import ConflictError, NotFoundError
from skillsphere.domain.model.invitation import Invitation
from skillsphere.domain.repository.invitation import InvitationRepository
from skillsphere.domain.repository.subscription import (
    ChangeListener,
    ChangeSubscription,
)
from skillsphere.domain.value import (
    HackathonId,
    InvitationId,
    InvitationStatus,
    UniquenessScope,
    UserId,
)


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing.

    Change listeners are called synchronously from inside the mutating call,
    before it returns.
    """

    def __init__(self, uniqueness_scope: UniquenessScope = UniquenessScope.PAIR) -> None:
        self.uniqueness_scope = uniqueness_scope
        self._invitations: dict[InvitationId, Invitation] = {}
        self._listeners: dict[int, tuple[UserId, ChangeListener]] = {}
        self._next_key = 0

    @property
    def subscriber_count(self) -> int:
        return len(self._listeners)

    async def list_invitations(
        self,
        as_sender: Optional[UserId] = None,
        as_recipient: Optional[UserId] = None,
    ) -> list[Invitation]:
        """List invitations, newest first (later inserts win ties)."""
        invitations = [
            inv
            for inv in reversed(list(self._invitations.values()))
            if (as_sender is None or inv.from_user_id == as_sender)
            and (as_recipient is None or inv.to_user_id == as_recipient)
        ]
        return sorted(invitations, key=lambda inv: inv.created_at, reverse=True)

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        return self._invitations.get(invitation_id)

    async def create_invitation(
        self,
        from_user_id: UserId,
        to_user_id: UserId,
        hackathon_id: Optional[HackathonId] = None,
        message: Optional[str] = None,
    ) -> Invitation:
        for existing in self._invitations.values():
            if existing.from_user_id != from_user_id or existing.to_user_id != to_user_id:
                continue
            if self.uniqueness_scope == UniquenessScope.PAIR or existing.is_active:
                raise ConflictError(str(from_user_id), str(to_user_id))

        now = datetime.now(timezone.utc)
        invitation = Invitation(
            id=InvitationId(uuid4()),
            from_user_id=from_user_id,
            to_user_id=to_user_id,
            hackathon_id=hackathon_id,
            status=InvitationStatus.PENDING,
            message=message,
            created_at=now,
            updated_at=now,
        )
        self._invitations[invitation.id] = invitation
        self._notify(invitation)
        return invitation

    async def update_invitation_status(
        self, invitation_id: InvitationId, status: InvitationStatus
    ) -> Invitation:
        invitation = self._invitations.get(invitation_id)
        if invitation is None:
            raise NotFoundError("Invitation", str(invitation_id))

        updated = invitation.with_status(status, datetime.now(timezone.utc))
        self._invitations[invitation_id] = updated
        self._notify(updated)
        return updated

    async def subscribe_to_changes(
        self, user_id: UserId, on_change: ChangeListener
    ) -> ChangeSubscription:
        key = self._next_key
        self._next_key += 1
        self._listeners[key] = (user_id, on_change)

        async def unsubscribe() -> None:
            self._listeners.pop(key, None)

        return ChangeSubscription(unsubscribe)

    def delete(self, invitation_id: InvitationId) -> None:
        """Remove an invitation outright (no change notification)."""
        self._invitations.pop(invitation_id, None)

    def _notify(self, invitation: Invitation) -> None:
        involved = {invitation.from_user_id, invitation.to_user_id}
        for user_id, listener in list(self._listeners.values()):
            if user_id in involved:
                listener()
