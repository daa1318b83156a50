"""Unit tests for InvitationEngine."""

import asyncio

import pytest
import pytest_asyncio

from skillsphere.application.engine import ErrorKind, InvitationEngine
from skillsphere.domain.error import SubscriptionError, TransientError
from skillsphere.domain.repository import ChangeSubscription
from skillsphere.domain.value import InvitationStatus, UniquenessScope
from skillsphere.persistence.repository.inmemory import (
    InMemoryInvitationRepository,
    InMemoryProfileRepository,
)
from tests.conftest import make_profile


class FlakyInvitationRepository(InMemoryInvitationRepository):
    """In-memory repository that can be told to fail or stall."""

    def __init__(self, uniqueness_scope: UniquenessScope = UniquenessScope.PAIR) -> None:
        super().__init__(uniqueness_scope)
        self.fail_reads: Exception | None = None
        self.fail_subscribe = False
        self.recipient_gate: asyncio.Event | None = None
        self.gate_entered = asyncio.Event()
        self.recipient_queries = 0
        self.fail_cancel = False

    async def list_invitations(self, as_sender=None, as_recipient=None):
        if self.fail_reads is not None:
            raise self.fail_reads
        result = await super().list_invitations(as_sender, as_recipient)
        if as_recipient is not None:
            self.recipient_queries += 1
            gate = self.recipient_gate
            if gate is not None:
                # Results are taken before waiting, so they go stale
                self.gate_entered.set()
                await gate.wait()
        return result

    async def subscribe_to_changes(self, user_id, on_change):
        if self.fail_subscribe:
            raise SubscriptionError("change feed unavailable")
        subscription = await super().subscribe_to_changes(user_id, on_change)
        if not self.fail_cancel:
            return subscription

        async def broken_cancel() -> None:
            await subscription.cancel()
            raise TransientError("connection reset while unlistening")

        return ChangeSubscription(broken_cancel)


@pytest.fixture
def profiles():
    return InMemoryProfileRepository()


@pytest.fixture
def invitations():
    return FlakyInvitationRepository()


@pytest_asyncio.fixture
async def people(profiles):
    alice = await profiles.save(make_profile("Alice", ["Frontend"]))
    bob = await profiles.save(make_profile("Bob", ["Backend"]))
    carol = await profiles.save(make_profile("Carol", ["UI/UX"]))
    return alice, bob, carol


def _engine(invitations, profiles) -> InvitationEngine:
    return InvitationEngine(invitations, profiles)


class TestFetchInvitations:
    """Tests for fetch_invitations."""

    @pytest.mark.asyncio
    async def test_loads_both_directions_with_counterpart_profiles(
        self, invitations, profiles, people
    ):
        # Arrange
        alice, bob, carol = people
        await invitations.create_invitation(bob.id, alice.id)
        await invitations.create_invitation(alice.id, carol.id)
        engine = _engine(invitations, profiles)

        # Act
        result = await engine.fetch_invitations(alice.id)

        # Assert
        assert result
        assert [i.from_user_id for i in engine.received_invitations] == [bob.id]
        assert engine.received_invitations[0].from_profile.name == "Bob"
        assert [i.to_user_id for i in engine.sent_invitations] == [carol.id]
        assert engine.sent_invitations[0].to_profile.name == "Carol"
        assert engine.unread_count == 1
        assert engine.is_loading is False

    @pytest.mark.asyncio
    async def test_orders_newest_first(self, invitations, profiles, people):
        alice, bob, carol = people
        older = await invitations.create_invitation(bob.id, alice.id)
        newer = await invitations.create_invitation(carol.id, alice.id)
        engine = _engine(invitations, profiles)

        await engine.fetch_invitations(alice.id)

        assert [i.id for i in engine.received_invitations] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_replaces_state_wholesale(self, invitations, profiles, people):
        """Invitations removed from the store disappear from state."""
        # Arrange
        alice, bob, carol = people
        gone = await invitations.create_invitation(bob.id, alice.id)
        await invitations.create_invitation(carol.id, alice.id)
        engine = _engine(invitations, profiles)
        await engine.fetch_invitations(alice.id)
        assert len(engine.received_invitations) == 2

        # Act
        invitations.delete(gone.id)
        await engine.fetch_invitations(alice.id)

        # Assert
        assert gone.id not in {i.id for i in engine.received_invitations}
        assert len(engine.received_invitations) == 1

    @pytest.mark.asyncio
    async def test_failure_keeps_previous_state(self, invitations, profiles, people):
        # Arrange
        alice, bob, _ = people
        await invitations.create_invitation(bob.id, alice.id)
        engine = _engine(invitations, profiles)
        await engine.fetch_invitations(alice.id)

        # Act
        invitations.fail_reads = TransientError("store offline")
        result = await engine.fetch_invitations(alice.id)

        # Assert
        assert not result
        assert result.error == ErrorKind.TRANSIENT
        assert len(engine.received_invitations) == 1
        assert engine.unread_count == 1
        assert engine.is_loading is False

    @pytest.mark.asyncio
    async def test_unexpected_error_does_not_escape(self, invitations, profiles, people):
        alice, _, _ = people
        engine = _engine(invitations, profiles)
        invitations.fail_reads = RuntimeError("boom")

        result = await engine.fetch_invitations(alice.id)

        assert not result
        assert result.error == ErrorKind.TRANSIENT
        assert engine.is_loading is False

    @pytest.mark.asyncio
    async def test_stale_fetch_does_not_overwrite_newer_one(
        self, invitations, profiles, people
    ):
        # Arrange
        alice, bob, carol = people
        await invitations.create_invitation(bob.id, alice.id)
        engine = _engine(invitations, profiles)

        gate = asyncio.Event()
        invitations.recipient_gate = gate
        slow = asyncio.create_task(engine.fetch_invitations(alice.id))
        await invitations.gate_entered.wait()
        invitations.recipient_gate = None

        # Act - a newer fetch sees a second invitation and lands first
        await invitations.create_invitation(carol.id, alice.id)
        fresh = await engine.fetch_invitations(alice.id)
        gate.set()
        stale = await slow

        # Assert
        assert fresh
        assert stale.message == "superseded"
        assert len(engine.received_invitations) == 2
        assert engine.unread_count == 2
        assert engine.is_loading is False


class TestSendInvitation:
    """Tests for send_invitation."""

    @pytest.mark.asyncio
    async def test_second_send_to_same_user_conflicts(
        self, invitations, profiles, people
    ):
        # Arrange
        alice, bob, _ = people
        engine = _engine(invitations, profiles)

        # Act
        first = await engine.send_invitation(alice.id, bob.id, message="Join us?")
        second = await engine.send_invitation(alice.id, bob.id)

        # Assert
        assert first
        assert not second
        assert second.error == ErrorKind.CONFLICT
        assert "already sent" in second.message
        assert len(engine.sent_invitations) == 1
        assert engine.sent_invitations[0].message == "Join us?"
        assert len(await invitations.list_invitations(as_sender=alice.id)) == 1

    @pytest.mark.asyncio
    async def test_resend_after_decline_conflicts_with_pair_scope(
        self, invitations, profiles, people
    ):
        # Arrange
        alice, bob, _ = people
        engine = _engine(invitations, profiles)
        sent = await engine.send_invitation(alice.id, bob.id)
        await invitations.update_invitation_status(sent.value.id, InvitationStatus.DECLINED)

        # Act
        again = await engine.send_invitation(alice.id, bob.id)

        # Assert
        assert not again
        assert again.error == ErrorKind.CONFLICT

    @pytest.mark.asyncio
    async def test_resend_after_decline_allowed_with_active_pair_scope(
        self, profiles, people
    ):
        # Arrange
        alice, bob, _ = people
        invitations = InMemoryInvitationRepository(UniquenessScope.ACTIVE_PAIR)
        engine = _engine(invitations, profiles)
        sent = await engine.send_invitation(alice.id, bob.id)

        # Act
        blocked = await engine.send_invitation(alice.id, bob.id)
        await invitations.update_invitation_status(sent.value.id, InvitationStatus.DECLINED)
        again = await engine.send_invitation(alice.id, bob.id)

        # Assert
        assert blocked.error == ErrorKind.CONFLICT
        assert again
        assert len(engine.sent_invitations) == 2

    @pytest.mark.asyncio
    async def test_cannot_invite_yourself(self, invitations, profiles, people):
        alice, _, _ = people
        engine = _engine(invitations, profiles)

        result = await engine.send_invitation(alice.id, alice.id)

        assert result.error == ErrorKind.VALIDATION
        assert await invitations.list_invitations(as_sender=alice.id) == []

    @pytest.mark.asyncio
    async def test_empty_message_stored_as_none(self, invitations, profiles, people):
        alice, bob, _ = people
        engine = _engine(invitations, profiles)

        result = await engine.send_invitation(alice.id, bob.id, message="")

        assert result.value.message is None


class TestRespondToInvitation:
    """Tests for respond_to_invitation."""

    @pytest.mark.asyncio
    async def test_patches_status_and_unread_count(self, invitations, profiles, people):
        # Arrange
        alice, bob, carol = people
        from_bob = await invitations.create_invitation(bob.id, alice.id)
        await invitations.create_invitation(carol.id, alice.id)
        engine = _engine(invitations, profiles)
        await engine.fetch_invitations(alice.id)
        assert engine.unread_count == 2
        queries_before = invitations.recipient_queries

        # Act
        result = await engine.respond_to_invitation(from_bob.id, InvitationStatus.ACCEPTED)

        # Assert
        assert result
        patched = next(i for i in engine.received_invitations if i.id == from_bob.id)
        assert patched.status == InvitationStatus.ACCEPTED
        assert patched.from_profile.name == "Bob"
        assert engine.unread_count == 1
        assert engine.unread_count == sum(
            1 for i in engine.received_invitations if i.status == InvitationStatus.PENDING
        )
        assert invitations.recipient_queries == queries_before  # no refetch

    @pytest.mark.asyncio
    async def test_second_different_answer_is_rejected(
        self, invitations, profiles, people
    ):
        # Arrange
        alice, bob, _ = people
        invitation = await invitations.create_invitation(bob.id, alice.id)
        engine = _engine(invitations, profiles)
        await engine.fetch_invitations(alice.id)

        # Act
        accepted = await engine.respond_to_invitation(invitation.id, InvitationStatus.ACCEPTED)
        declined = await engine.respond_to_invitation(invitation.id, InvitationStatus.DECLINED)

        # Assert
        assert accepted
        assert declined.error == ErrorKind.INVALID_TRANSITION
        assert engine.received_invitations[0].status == InvitationStatus.ACCEPTED
        stored = await invitations.find_by_id(invitation.id)
        assert stored.status == InvitationStatus.ACCEPTED

    @pytest.mark.asyncio
    async def test_repeating_same_answer_succeeds(self, invitations, profiles, people):
        alice, bob, _ = people
        invitation = await invitations.create_invitation(bob.id, alice.id)
        engine = _engine(invitations, profiles)
        await engine.fetch_invitations(alice.id)

        await engine.respond_to_invitation(invitation.id, InvitationStatus.DECLINED)
        again = await engine.respond_to_invitation(invitation.id, InvitationStatus.DECLINED)

        assert again
        assert engine.unread_count == 0

    @pytest.mark.asyncio
    async def test_pending_is_not_a_valid_answer(self, invitations, profiles, people):
        alice, bob, _ = people
        invitation = await invitations.create_invitation(bob.id, alice.id)
        engine = _engine(invitations, profiles)

        result = await engine.respond_to_invitation(invitation.id, InvitationStatus.PENDING)

        assert result.error == ErrorKind.VALIDATION

    @pytest.mark.asyncio
    async def test_unknown_invitation_leaves_state_untouched(
        self, invitations, profiles, people
    ):
        # Arrange
        alice, bob, _ = people
        invitation = await invitations.create_invitation(bob.id, alice.id)
        engine = _engine(invitations, profiles)
        await engine.fetch_invitations(alice.id)
        invitations.delete(invitation.id)

        # Act
        result = await engine.respond_to_invitation(invitation.id, InvitationStatus.ACCEPTED)

        # Assert
        assert result.error == ErrorKind.NOT_FOUND
        assert engine.received_invitations[0].status == InvitationStatus.PENDING
        assert engine.unread_count == 1


class TestSubscribeToInvitations:
    """Tests for subscribe_to_invitations."""

    @pytest.mark.asyncio
    async def test_change_triggers_refetch(self, invitations, profiles, people):
        # Arrange
        alice, bob, _ = people
        bob_engine = _engine(invitations, profiles)
        alice_engine = _engine(invitations, profiles)
        subscription = await bob_engine.subscribe_to_invitations(bob.id)
        assert subscription

        # Act
        await alice_engine.send_invitation(alice.id, bob.id)
        await bob_engine.wait_for_refresh()

        # Assert
        assert [i.from_user_id for i in bob_engine.received_invitations] == [alice.id]
        assert bob_engine.received_invitations[0].from_profile.name == "Alice"
        assert bob_engine.unread_count == 1

        await bob_engine.close()

    @pytest.mark.asyncio
    async def test_unrelated_changes_are_ignored(self, invitations, profiles, people):
        alice, bob, carol = people
        engine = _engine(invitations, profiles)
        await engine.subscribe_to_invitations(alice.id)

        await invitations.create_invitation(bob.id, carol.id)
        await engine.wait_for_refresh()

        assert invitations.recipient_queries == 0
        await engine.close()

    @pytest.mark.asyncio
    async def test_notification_burst_is_coalesced(self, invitations, profiles, people):
        # Arrange
        alice, bob, carol = people
        engine = _engine(invitations, profiles)
        await engine.subscribe_to_invitations(alice.id)

        # Act - three changes before the event loop gets a chance to refresh
        await invitations.create_invitation(bob.id, alice.id)
        await invitations.create_invitation(carol.id, alice.id)
        await invitations.create_invitation(alice.id, bob.id)
        await engine.wait_for_refresh()

        # Assert
        assert invitations.recipient_queries == 1
        assert len(engine.received_invitations) == 2
        assert len(engine.sent_invitations) == 1
        await engine.close()

    @pytest.mark.asyncio
    async def test_cancel_twice_is_harmless(self, invitations, profiles, people):
        # Arrange
        alice, _, _ = people
        engine = _engine(invitations, profiles)
        result = await engine.subscribe_to_invitations(alice.id)
        assert engine.active_subscriptions == 1
        assert invitations.subscriber_count == 1

        # Act
        await result.value.cancel()
        await result.value.cancel()

        # Assert
        assert result.value.cancelled
        assert engine.active_subscriptions == 0
        assert invitations.subscriber_count == 0

    @pytest.mark.asyncio
    async def test_no_refresh_after_cancel(self, invitations, profiles, people):
        alice, bob, _ = people
        engine = _engine(invitations, profiles)
        result = await engine.subscribe_to_invitations(alice.id)
        await result.value.cancel()

        await invitations.create_invitation(bob.id, alice.id)
        await engine.wait_for_refresh()

        assert engine.received_invitations == []

    @pytest.mark.asyncio
    async def test_feed_failure_is_reported(self, invitations, profiles, people):
        alice, _, _ = people
        engine = _engine(invitations, profiles)
        invitations.fail_subscribe = True

        result = await engine.subscribe_to_invitations(alice.id)

        assert not result
        assert result.error == ErrorKind.SUBSCRIPTION
        assert engine.active_subscriptions == 0

    @pytest.mark.asyncio
    async def test_close_cancels_every_subscription(self, invitations, profiles, people):
        alice, _, _ = people
        engine = _engine(invitations, profiles)
        await engine.subscribe_to_invitations(alice.id)
        await engine.subscribe_to_invitations(alice.id)

        await engine.close()

        assert engine.active_subscriptions == 0
        assert invitations.subscriber_count == 0

    @pytest.mark.asyncio
    async def test_feed_cancel_failure_still_ends_subscription(
        self, invitations, profiles, people
    ):
        # Arrange
        alice, _, _ = people
        engine = _engine(invitations, profiles)
        invitations.fail_cancel = True
        result = await engine.subscribe_to_invitations(alice.id)

        # Act
        await result.value.cancel()

        # Assert
        assert result.value.cancelled
        assert engine.active_subscriptions == 0
        assert invitations.subscriber_count == 0

        await engine.close()
