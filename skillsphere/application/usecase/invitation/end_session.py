"""End invitation session use case."""

from uuid import UUID

from pydantic import BaseModel

from skillsphere.application.engine import InvitationEngineRegistry
from skillsphere.application.usecase.base import BaseUseCase
from skillsphere.domain.value import UserId


class EndSessionRequest(BaseModel):
    """End session request."""

    user_id: str


class EndSessionResponse(BaseModel):
    """End session response."""

    released: bool


class EndSessionUseCase(BaseUseCase):
    """Use case for dropping a user's live invitation session (logout)."""

    def __init__(self, engine_registry: InvitationEngineRegistry) -> None:
        self.engine_registry = engine_registry

    async def execute(self, request: EndSessionRequest) -> EndSessionResponse:
        released = await self.engine_registry.release(UserId(UUID(request.user_id)))
        return EndSessionResponse(released=released)
