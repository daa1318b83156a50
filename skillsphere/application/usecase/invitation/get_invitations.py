"""Get invitations use case."""

from uuid import UUID

from pydantic import BaseModel

from skillsphere.application.engine import InvitationEngineRegistry
from skillsphere.application.usecase.base import BaseUseCase
from skillsphere.application.usecase.invitation.common import InvitationItem
from skillsphere.domain.value import UserId


class GetInvitationsRequest(BaseModel):
    """Get invitations request."""

    user_id: str  # User ID from auth


class GetInvitationsResponse(BaseModel):
    """The user's invitations, newest first."""

    received: list[InvitationItem]
    sent: list[InvitationItem]
    unread_count: int
    is_loading: bool


class GetInvitationsUseCase(BaseUseCase):
    """Use case for reading a user's invitation state."""

    def __init__(self, engine_registry: InvitationEngineRegistry) -> None:
        """Initialize get invitations use case.

        Args:
            engine_registry: Session invitation engines
        """
        self.engine_registry = engine_registry

    async def execute(self, request: GetInvitationsRequest) -> GetInvitationsResponse:
        """Return the engine's current snapshot.

        A change-triggered refresh that is already running is awaited first,
        so the response reflects the latest signal.
        """
        user_id = UserId(UUID(request.user_id))

        engine = await self.engine_registry.get_engine(user_id)
        await engine.wait_for_refresh()
        snapshot = engine.snapshot()

        return GetInvitationsResponse(
            received=[InvitationItem.from_invitation(inv) for inv in snapshot.received_invitations],
            sent=[InvitationItem.from_invitation(inv) for inv in snapshot.sent_invitations],
            unread_count=snapshot.unread_count,
            is_loading=snapshot.is_loading,
        )
