"""Team invitation entity.

An invitation is a directed request from one user to another to join a team,
optionally in the context of a specific hackathon.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from skillsphere.domain.error import InvalidTransitionError
from skillsphere.domain.model.common import DomainModel
from skillsphere.domain.model.profile import Profile
from skillsphere.domain.value import HackathonId, InvitationId, InvitationStatus, UserId


class Invitation(DomainModel):
    """Team invitation.

    Business rules:
    - Created as pending by the sender
    - Moves exactly once to accepted or declined, by the recipient
    - At most one invitation per ordered (from, to) pair; whether declined
      invitations count is decided by the store's uniqueness scope

    ``from_profile`` and ``to_profile`` are display data attached by the
    invitation engine; they are never persisted.
    """

    id: InvitationId
    from_user_id: UserId
    to_user_id: UserId
    hackathon_id: Optional[HackathonId] = None
    status: InvitationStatus = InvitationStatus.PENDING
    message: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    from_profile: Optional[Profile] = None
    to_profile: Optional[Profile] = None

    @property
    def is_active(self) -> bool:
        """Whether the invitation still blocks re-inviting the recipient."""
        return self.status != InvitationStatus.DECLINED

    def with_status(
        self, status: InvitationStatus, updated_at: datetime | None = None
    ) -> "Invitation":
        """Return a copy with the new status.

        Raises:
            InvalidTransitionError: If the current status is terminal and differs
        """
        if not self.status.can_transition_to(status):
            raise InvalidTransitionError(
                str(self.id), self.status.value, status.value
            )
        return self.model_copy(
            update={"status": status, "updated_at": updated_at or datetime.now()}
        )
