"""Send invitation use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from skillsphere.application.engine import ErrorKind, InvitationEngineRegistry
from skillsphere.application.usecase.base import BaseUseCase
from skillsphere.application.usecase.invitation.common import InvitationItem
from skillsphere.domain.value import HackathonId, UserId


class SendInvitationRequest(BaseModel):
    """Request to invite a user to team up."""

    from_user_id: str
    to_user_id: str
    hackathon_id: str | None = None
    message: str | None = Field(default=None, max_length=500)


class SendInvitationResponse(BaseModel):
    """Outcome of sending an invitation."""

    sent: bool
    invitation: InvitationItem | None = None
    error: ErrorKind | None = None
    message: str | None = None


class SendInvitationUseCase(BaseUseCase):
    """Use case for sending a team invitation."""

    def __init__(self, engine_registry: InvitationEngineRegistry) -> None:
        """Initialize send invitation use case.

        Args:
            engine_registry: Session invitation engines
        """
        self.engine_registry = engine_registry

    async def execute(self, request: SendInvitationRequest) -> SendInvitationResponse:
        """Send the invitation through the sender's engine."""
        from_user_id = UserId(UUID(request.from_user_id))
        to_user_id = UserId(UUID(request.to_user_id))
        hackathon_id = HackathonId(UUID(request.hackathon_id)) if request.hackathon_id else None

        with logfire.span(
            "send_invitation",
            from_user_id=str(from_user_id),
            to_user_id=str(to_user_id),
        ):
            engine = await self.engine_registry.get_engine(from_user_id)
            result = await engine.send_invitation(
                from_user_id, to_user_id, hackathon_id, request.message
            )

            if not result:
                return SendInvitationResponse(
                    sent=False, error=result.error, message=result.message
                )
            return SendInvitationResponse(
                sent=True,
                invitation=InvitationItem.from_invitation(result.value),
                message="Invitation sent",
            )
