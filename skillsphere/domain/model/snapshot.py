"""Point-in-time view of a user's invitations."""

from pydantic import Field

from skillsphere.domain.model.common import DomainModel
from skillsphere.domain.model.invitation import Invitation


class InvitationSnapshot(DomainModel):
    """Received and sent invitations, newest first, plus the unread badge count."""

    received_invitations: list[Invitation] = Field(default_factory=list)
    sent_invitations: list[Invitation] = Field(default_factory=list)
    unread_count: int = 0
    is_loading: bool = False
