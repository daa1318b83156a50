"""Unit tests for the in-memory invitation repository."""

from uuid import uuid4

import pytest

from skillsphere.domain.error import ConflictError, NotFoundError
from skillsphere.domain.value import (
    InvitationId,
    InvitationStatus,
    UniquenessScope,
    UserId,
)
from skillsphere.persistence.repository.inmemory import InMemoryInvitationRepository


def _user() -> UserId:
    return UserId(uuid4())


class TestInMemoryInvitationRepository:
    """Store semantics the engine relies on."""

    @pytest.mark.asyncio
    async def test_lists_newest_first_per_direction(self):
        repo = InMemoryInvitationRepository()
        alice, bob, carol = _user(), _user(), _user()
        first = await repo.create_invitation(alice, bob)
        second = await repo.create_invitation(carol, bob)
        await repo.create_invitation(bob, alice)

        received = await repo.list_invitations(as_recipient=bob)

        assert [inv.id for inv in received] == [second.id, first.id]
        assert [inv.to_user_id for inv in await repo.list_invitations(as_sender=bob)] == [
            alice
        ]

    @pytest.mark.asyncio
    async def test_pair_scope_rejects_any_repeat(self):
        repo = InMemoryInvitationRepository(UniquenessScope.PAIR)
        alice, bob = _user(), _user()
        invitation = await repo.create_invitation(alice, bob)
        await repo.update_invitation_status(invitation.id, InvitationStatus.DECLINED)

        with pytest.raises(ConflictError):
            await repo.create_invitation(alice, bob)

    @pytest.mark.asyncio
    async def test_active_pair_scope_allows_reinvite_after_decline(self):
        repo = InMemoryInvitationRepository(UniquenessScope.ACTIVE_PAIR)
        alice, bob = _user(), _user()
        invitation = await repo.create_invitation(alice, bob)

        with pytest.raises(ConflictError):
            await repo.create_invitation(alice, bob)

        await repo.update_invitation_status(invitation.id, InvitationStatus.DECLINED)
        again = await repo.create_invitation(alice, bob)

        assert again.status == InvitationStatus.PENDING

    @pytest.mark.asyncio
    async def test_reverse_direction_is_a_different_pair(self):
        repo = InMemoryInvitationRepository()
        alice, bob = _user(), _user()
        await repo.create_invitation(alice, bob)

        reverse = await repo.create_invitation(bob, alice)

        assert reverse.from_user_id == bob

    @pytest.mark.asyncio
    async def test_update_unknown_invitation_raises_not_found(self):
        repo = InMemoryInvitationRepository()

        with pytest.raises(NotFoundError):
            await repo.update_invitation_status(
                InvitationId(uuid4()), InvitationStatus.ACCEPTED
            )

    @pytest.mark.asyncio
    async def test_listeners_only_hear_about_their_invitations(self):
        # Arrange
        repo = InMemoryInvitationRepository()
        alice, bob, carol = _user(), _user(), _user()
        calls = {alice: 0, bob: 0, carol: 0}

        def listener_for(user_id):
            def on_change():
                calls[user_id] += 1

            return on_change

        for user_id in calls:
            await repo.subscribe_to_changes(user_id, listener_for(user_id))

        # Act
        invitation = await repo.create_invitation(alice, bob)
        await repo.update_invitation_status(invitation.id, InvitationStatus.ACCEPTED)

        # Assert
        assert calls == {alice: 2, bob: 2, carol: 0}

    @pytest.mark.asyncio
    async def test_cancelled_subscription_stops_notifications(self):
        repo = InMemoryInvitationRepository()
        alice, bob = _user(), _user()
        calls = []
        subscription = await repo.subscribe_to_changes(bob, lambda: calls.append(1))

        await subscription.cancel()
        await repo.create_invitation(alice, bob)

        assert calls == []
        assert repo.subscriber_count == 0
