"""Respond to invitation use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from skillsphere.application.engine import ErrorKind, InvitationEngineRegistry
from skillsphere.application.usecase.base import BaseUseCase
from skillsphere.application.usecase.invitation.common import InvitationItem
from skillsphere.domain.value import InvitationId, InvitationStatus, UserId


class RespondToInvitationRequest(BaseModel):
    """Request to accept or decline a received invitation."""

    user_id: str  # Recipient, from auth
    invitation_id: str
    status: InvitationStatus


class RespondToInvitationResponse(BaseModel):
    """Outcome of answering an invitation."""

    updated: bool
    invitation: InvitationItem | None = None
    unread_count: int
    error: ErrorKind | None = None
    message: str | None = None


class RespondToInvitationUseCase(BaseUseCase):
    """Use case for answering a received invitation."""

    def __init__(self, engine_registry: InvitationEngineRegistry) -> None:
        """Initialize respond use case.

        Args:
            engine_registry: Session invitation engines
        """
        self.engine_registry = engine_registry

    async def execute(
        self, request: RespondToInvitationRequest
    ) -> RespondToInvitationResponse:
        """Answer an invitation the user has received.

        Invitations not addressed to the user are reported as not found.
        """
        user_id = UserId(UUID(request.user_id))
        invitation_id = InvitationId(UUID(request.invitation_id))

        with logfire.span(
            "respond_to_invitation",
            user_id=str(user_id),
            invitation_id=str(invitation_id),
            status=request.status.value,
        ):
            engine = await self.engine_registry.get_engine(user_id)
            await engine.wait_for_refresh()

            if not self._is_received(engine.received_invitations, invitation_id):
                # State may predate the invitation; reload once before giving up
                await engine.fetch_invitations(user_id)
                if not self._is_received(engine.received_invitations, invitation_id):
                    return RespondToInvitationResponse(
                        updated=False,
                        unread_count=engine.unread_count,
                        error=ErrorKind.NOT_FOUND,
                        message="Invitation not found",
                    )

            result = await engine.respond_to_invitation(invitation_id, request.status)
            if not result:
                return RespondToInvitationResponse(
                    updated=False,
                    unread_count=engine.unread_count,
                    error=result.error,
                    message=result.message,
                )

            # A refresh may have dropped the entry meanwhile; the store copy is
            # then the freshest view
            patched = next(
                (inv for inv in engine.received_invitations if inv.id == invitation_id),
                result.value,
            )
            return RespondToInvitationResponse(
                updated=True,
                invitation=InvitationItem.from_invitation(patched),
                unread_count=engine.unread_count,
            )

    @staticmethod
    def _is_received(received, invitation_id: InvitationId) -> bool:
        return any(inv.id == invitation_id for inv in received)
