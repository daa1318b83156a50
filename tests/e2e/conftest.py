"""Shared fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from skillsphere.config import AuthSettings
from skillsphere.domain.repository import HackathonRepository, ProfileRepository
from skillsphere.interface.api.app import create_app
from skillsphere.util.jwt import create_token
from tests.conftest import make_hackathon, make_profile
from tests.di import build_test_container


class ApiClient:
    """TestClient plus helpers for seeding the in-memory stores."""

    def __init__(self, client: TestClient, container) -> None:
        self.client = client
        self.container = container

    def add_profile(self, name: str, skills: list[str], **kwargs):
        async def _save():
            repo = await self.container.get(ProfileRepository)
            return await repo.save(make_profile(name, skills, **kwargs))

        return self.client.portal.call(_save)

    def add_hackathon(self, title: str, skills_required: list[str], **kwargs):
        async def _save():
            repo = await self.container.get(HackathonRepository)
            return await repo.save(make_hackathon(title, skills_required, **kwargs))

        return self.client.portal.call(_save)

    def auth(self, profile) -> dict[str, str]:
        settings = self.client.portal.call(self.container.get, AuthSettings)
        token = create_token(str(profile.id), settings, email=profile.email)
        return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def api():
    """API client backed by the in-memory test container."""
    container = build_test_container()
    with TestClient(create_app(container)) as client:
        yield ApiClient(client, container)
