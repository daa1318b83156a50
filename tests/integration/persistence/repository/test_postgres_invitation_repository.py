"""Integration tests for PostgresInvitationRepository.

Run against a migrated database:

    DATABASE__URL=postgresql+asyncpg://... alembic upgrade head
    DATABASE__URL=postgresql+asyncpg://... pytest -m integration
"""

import asyncio
import os
from uuid import uuid4

import pytest

from skillsphere.domain.error import ConflictError, InvalidTransitionError, NotFoundError
from skillsphere.domain.repository import InvitationRepository, ProfileRepository
from skillsphere.domain.value import InvitationId, InvitationStatus, UserId
from tests.conftest import make_profile
from tests.harness import create_env_fixture

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        "DATABASE__URL" not in os.environ,
        reason="DATABASE__URL not set; needs a migrated PostgreSQL",
    ),
]

integration_env = create_env_fixture(unmock={"persistence"})


async def _pair(integration_env):
    profiles = await integration_env.get(ProfileRepository)
    alice = await profiles.save(make_profile("Alice", ["Frontend"]))
    bob = await profiles.save(make_profile("Bob", ["Backend"]))
    return alice.id, bob.id


class TestPostgresInvitationRepository:
    """Store behaviour against a real database."""

    @pytest.mark.asyncio
    async def test_duplicate_pair_raises_conflict(self, integration_env):
        repo = await integration_env.get(InvitationRepository)
        alice, bob = await _pair(integration_env)

        created = await repo.create_invitation(alice, bob, message="Team up?")
        with pytest.raises(ConflictError):
            await repo.create_invitation(alice, bob)

        received = await repo.list_invitations(as_recipient=bob)
        assert [inv.id for inv in received] == [created.id]
        assert received[0].message == "Team up?"

    @pytest.mark.asyncio
    async def test_unknown_recipient_raises_not_found(self, integration_env):
        repo = await integration_env.get(InvitationRepository)
        alice, _ = await _pair(integration_env)

        with pytest.raises(NotFoundError):
            await repo.create_invitation(alice, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_answer_is_final(self, integration_env):
        repo = await integration_env.get(InvitationRepository)
        alice, bob = await _pair(integration_env)
        invitation = await repo.create_invitation(alice, bob)

        accepted = await repo.update_invitation_status(
            invitation.id, InvitationStatus.ACCEPTED
        )
        again = await repo.update_invitation_status(
            invitation.id, InvitationStatus.ACCEPTED
        )

        assert accepted.status == InvitationStatus.ACCEPTED
        assert again.status == InvitationStatus.ACCEPTED
        with pytest.raises(InvalidTransitionError):
            await repo.update_invitation_status(
                invitation.id, InvitationStatus.DECLINED
            )

    @pytest.mark.asyncio
    async def test_update_unknown_invitation_raises_not_found(self, integration_env):
        repo = await integration_env.get(InvitationRepository)

        with pytest.raises(NotFoundError):
            await repo.update_invitation_status(
                InvitationId(uuid4()), InvitationStatus.ACCEPTED
            )

    @pytest.mark.asyncio
    async def test_change_feed_signals_recipient(self, integration_env):
        # Arrange
        repo = await integration_env.get(InvitationRepository)
        alice, bob = await _pair(integration_env)
        signalled = asyncio.Event()
        subscription = await repo.subscribe_to_changes(bob, signalled.set)

        # Act
        try:
            await repo.create_invitation(alice, bob)
            await asyncio.wait_for(signalled.wait(), timeout=5)
        finally:
            await subscription.cancel()

        # Assert
        assert signalled.is_set()
