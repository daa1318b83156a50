"""Teammate match routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, Query, status

from skillsphere.application.usecase.match import (
    GetMatchesRequest,
    GetMatchesResponse,
    GetMatchesUseCase,
)
from skillsphere.domain.error import NotFoundError
from skillsphere.domain.service import JWTService
from skillsphere.domain.value import Education
from skillsphere.interface.api.routes.common import authenticate

router = APIRouter(prefix="/matches", tags=["matches"], route_class=DishkaRoute)


@router.get("", response_model=GetMatchesResponse)
async def get_matches(
    get_matches_use_case: FromDishka[GetMatchesUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    search: str | None = Query(default=None, max_length=100),
    education: Education | None = Query(default=None),
) -> GetMatchesResponse:
    """Rank every other user by skill overlap with the caller.

    Args:
        get_matches_use_case: Get matches use case from DI
        jwt_service: JWT service from DI
        authorization: Bearer token header
        search: Case-insensitive substring of a name or skill
        education: Only candidates with this education level

    Returns:
        Ranked matches with totals

    Raises:
        HTTPException: 401 if not authenticated, 404 if the caller has no profile
    """
    user_id = authenticate(jwt_service, authorization)

    try:
        return await get_matches_use_case.execute(
            GetMatchesRequest(viewer_id=user_id, search=search, education=education)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
