"""Invitation representation shared by invitation use cases."""

from datetime import datetime

from pydantic import BaseModel

from skillsphere.application.usecase.profile.summary import ProfileSummary
from skillsphere.domain.model import Invitation
from skillsphere.domain.value import InvitationStatus


class InvitationItem(BaseModel):
    """Invitation in API responses.

    ``counterpart`` is the other party: the sender for received invitations,
    the recipient for sent ones.
    """

    invitation_id: str
    from_user_id: str
    to_user_id: str
    hackathon_id: str | None = None
    status: InvitationStatus
    message: str | None = None
    created_at: datetime
    updated_at: datetime
    counterpart: ProfileSummary | None = None

    @classmethod
    def from_invitation(cls, invitation: Invitation) -> "InvitationItem":
        counterpart = invitation.from_profile or invitation.to_profile
        return cls(
            invitation_id=str(invitation.id),
            from_user_id=str(invitation.from_user_id),
            to_user_id=str(invitation.to_user_id),
            hackathon_id=str(invitation.hackathon_id) if invitation.hackathon_id else None,
            status=invitation.status,
            message=invitation.message,
            created_at=invitation.created_at,
            updated_at=invitation.updated_at,
            counterpart=ProfileSummary.from_profile(counterpart) if counterpart else None,
        )
