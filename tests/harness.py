"""Container fixtures for unit and integration tests."""

import pytest_asyncio

from skillsphere.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Make a fixture yielding a request-scoped container.

    Repositories and the invitation engine registry are APP-scoped, so each
    test gets fresh in-memory stores and a fresh registry. The whole
    container is closed afterwards, which cancels every change subscription
    the test opened.

    Usage:
        unit_env = create_env_fixture()
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_send(unit_env):
            use_case = await unit_env.get(SendInvitationUseCase)
    """

    @pytest_asyncio.fixture
    async def _env():
        container = build_test_container(unmock=unmock)
        async with container() as request_container:
            yield request_container
        await container.close()

    return _env
