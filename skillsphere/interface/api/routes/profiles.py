"""Profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import BaseModel, Field

from skillsphere.application.usecase.profile import (
    ProfileSummary,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from skillsphere.domain.error import NotFoundError, ValidationError
from skillsphere.domain.service import JWTService
from skillsphere.domain.value import Education
from skillsphere.interface.api.routes.common import authenticate

router = APIRouter(prefix="/profiles", tags=["profiles"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the caller's profile."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    education: Education | None = None
    skills: list[str] | None = Field(default=None, max_length=30)


@router.patch("/me", response_model=ProfileSummary)
async def update_my_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ProfileSummary:
    """Update the caller's name, education or skills.

    Raises:
        HTTPException: 401 if not authenticated, 404 if no profile exists,
            422 if a value is invalid
    """
    user_id = authenticate(jwt_service, authorization)

    try:
        return await update_profile_use_case.execute(
            UpdateProfileRequest(
                user_id=user_id,
                name=request.name,
                education=request.education,
                skills=request.skills,
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)
        )
