"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skillsphere.config import Settings
from skillsphere.interface.api.routes import (
    hackathons,
    health,
    invitations,
    matches,
    profiles,
)
from skillsphere.util.di.container import create_container, setup_di
from skillsphere.util.error import ConfigurationError
from skillsphere.util.observability import instrument_fastapi

_DEFAULT_JWT_SECRET = "CHANGE_ME_IN_PRODUCTION"


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Closes the engine registry (and with it every change subscription),
    # then the database engine
    await app.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use instead of the production one (tests)

    Raises:
        ConfigurationError: If production runs with the default JWT secret
    """
    settings = Settings()
    if settings.environment == "production" and settings.auth.jwt_secret == _DEFAULT_JWT_SECRET:
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")

    app_instance = FastAPI(
        title="SkillSphere API",
        description="Backend API for SkillSphere - skill-based teammate matching and team invitations for hackathons",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(matches.router)
    app_instance.include_router(invitations.router)
    app_instance.include_router(profiles.router)
    app_instance.include_router(hackathons.router)

    return app_instance
