"""Health check route."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from skillsphere.application.engine import InvitationEngineRegistry
from skillsphere.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Liveness plus the number of users with live invitation updates."""

    status: str
    environment: str
    live_sessions: int


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings],
    engine_registry: FromDishka[InvitationEngineRegistry],
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        environment=settings.environment,
        live_sessions=len(engine_registry),
    )
