"""Invitation use cases."""

from skillsphere.application.usecase.invitation.common import InvitationItem
from skillsphere.application.usecase.invitation.end_session import (
    EndSessionRequest,
    EndSessionResponse,
    EndSessionUseCase,
)
from skillsphere.application.usecase.invitation.get_invitations import (
    GetInvitationsRequest,
    GetInvitationsResponse,
    GetInvitationsUseCase,
)
from skillsphere.application.usecase.invitation.respond_to_invitation import (
    RespondToInvitationRequest,
    RespondToInvitationResponse,
    RespondToInvitationUseCase,
)
from skillsphere.application.usecase.invitation.send_invitation import (
    SendInvitationRequest,
    SendInvitationResponse,
    SendInvitationUseCase,
)

__all__ = [
    "EndSessionRequest",
    "EndSessionResponse",
    "EndSessionUseCase",
    "GetInvitationsRequest",
    "GetInvitationsResponse",
    "GetInvitationsUseCase",
    "InvitationItem",
    "RespondToInvitationRequest",
    "RespondToInvitationResponse",
    "RespondToInvitationUseCase",
    "SendInvitationRequest",
    "SendInvitationResponse",
    "SendInvitationUseCase",
]
