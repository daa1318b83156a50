"""Team invitation routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, Field

from skillsphere.application.usecase.invitation import (
    EndSessionRequest,
    EndSessionResponse,
    EndSessionUseCase,
    GetInvitationsRequest,
    GetInvitationsResponse,
    GetInvitationsUseCase,
    RespondToInvitationRequest,
    RespondToInvitationResponse,
    RespondToInvitationUseCase,
    SendInvitationRequest,
    SendInvitationResponse,
    SendInvitationUseCase,
)
from skillsphere.domain.service import JWTService
from skillsphere.domain.value import InvitationStatus
from skillsphere.interface.api.routes.common import authenticate, raise_for_error

router = APIRouter(prefix="/invitations", tags=["invitations"], route_class=DishkaRoute)


class SendInvitationAPIRequest(BaseModel):
    """API request for sending an invitation."""

    to_user_id: UUID
    hackathon_id: UUID | None = None
    message: str | None = Field(default=None, max_length=500)


class RespondToInvitationAPIRequest(BaseModel):
    """API request for answering an invitation."""

    status: InvitationStatus


@router.get("", response_model=GetInvitationsResponse)
async def get_invitations(
    get_invitations_use_case: FromDishka[GetInvitationsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> GetInvitationsResponse:
    """Received and sent invitations of the caller, with the unread count.

    Raises:
        HTTPException: 401 if not authenticated
    """
    user_id = authenticate(jwt_service, authorization)
    return await get_invitations_use_case.execute(GetInvitationsRequest(user_id=user_id))


@router.post(
    "", response_model=SendInvitationResponse, status_code=status.HTTP_201_CREATED
)
async def send_invitation(
    request: SendInvitationAPIRequest,
    send_invitation_use_case: FromDishka[SendInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> SendInvitationResponse:
    """Invite another user to team up.

    Raises:
        HTTPException: 401 if not authenticated, 409 if already invited,
            400 for a self-invite, 503 if the store is unavailable
    """
    user_id = authenticate(jwt_service, authorization)

    response = await send_invitation_use_case.execute(
        SendInvitationRequest(
            from_user_id=user_id,
            to_user_id=str(request.to_user_id),
            hackathon_id=str(request.hackathon_id) if request.hackathon_id else None,
            message=request.message,
        )
    )
    if not response.sent:
        raise_for_error(response.error, response.message)
    return response


@router.post("/{invitation_id}/respond", response_model=RespondToInvitationResponse)
async def respond_to_invitation(
    invitation_id: UUID,
    request: RespondToInvitationAPIRequest,
    respond_use_case: FromDishka[RespondToInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> RespondToInvitationResponse:
    """Accept or decline an invitation addressed to the caller.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the invitation is not
            the caller's, 409 if it was already answered differently
    """
    user_id = authenticate(jwt_service, authorization)

    response = await respond_use_case.execute(
        RespondToInvitationRequest(
            user_id=user_id,
            invitation_id=str(invitation_id),
            status=request.status,
        )
    )
    if not response.updated:
        raise_for_error(response.error, response.message)
    return response


@router.delete("/session", response_model=EndSessionResponse)
async def end_session(
    end_session_use_case: FromDishka[EndSessionUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> EndSessionResponse:
    """Stop live invitation updates for the caller (logout)."""
    user_id = authenticate(jwt_service, authorization)
    return await end_session_use_case.execute(EndSessionRequest(user_id=user_id))
