"""Hackathon routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status

from skillsphere.application.usecase.profile import (
    GetRecommendationsRequest,
    GetRecommendationsResponse,
    GetRecommendationsUseCase,
)
from skillsphere.domain.error import NotFoundError
from skillsphere.domain.service import JWTService
from skillsphere.interface.api.routes.common import authenticate

router = APIRouter(prefix="/hackathons", tags=["hackathons"], route_class=DishkaRoute)


@router.get("/recommended", response_model=GetRecommendationsResponse)
async def get_recommended_hackathons(
    get_recommendations_use_case: FromDishka[GetRecommendationsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> GetRecommendationsResponse:
    """Open hackathons the caller is not enrolled in, sharing at least one skill."""
    user_id = authenticate(jwt_service, authorization)

    try:
        return await get_recommendations_use_case.execute(
            GetRecommendationsRequest(user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
