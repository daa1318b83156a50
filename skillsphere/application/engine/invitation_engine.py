"""Invitation engine.

Holds one user's received/sent invitations in memory, runs send/respond
operations against the store, and keeps the state fresh by re-fetching
whenever the change feed signals that something moved.

All state lives in an ``InvitationState`` owned by the engine; nothing else
writes to it. Every mutation is either a full snapshot replace (fetch) or a
single keyed patch (respond), so overlapping calls resolve as
last-write-wins without locking.
"""

import asyncio
from dataclasses import dataclass, field

import logfire

from skillsphere.application.engine.result import ErrorKind, OperationResult
from skillsphere.domain.error import ConflictError, DomainError
from skillsphere.domain.model import Invitation, InvitationSnapshot
from skillsphere.domain.repository import (
    ChangeSubscription,
    InvitationRepository,
    ProfileRepository,
)
from skillsphere.domain.value import HackathonId, InvitationId, InvitationStatus, UserId

ALREADY_INVITED_MESSAGE = "You have already sent an invitation to this user."


@dataclass
class InvitationState:
    """Mutable invitation state owned by a single engine."""

    received_invitations: list[Invitation] = field(default_factory=list)
    sent_invitations: list[Invitation] = field(default_factory=list)
    unread_count: int = 0
    is_loading: bool = False


def count_unread(received: list[Invitation]) -> int:
    """Unread count = received invitations still awaiting an answer."""
    return sum(1 for inv in received if inv.status == InvitationStatus.PENDING)


class InvitationEngine:
    """Per-session invitation state and operations.

    No exception escapes a public operation: failures come back as a falsy
    ``OperationResult`` and the previous state is left untouched.
    """

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        profile_repository: ProfileRepository,
    ) -> None:
        """Initialize invitation engine.

        Args:
            invitation_repository: Invitation repository (store + change feed)
            profile_repository: Profile repository for display enrichment
        """
        self.invitation_repository = invitation_repository
        self.profile_repository = profile_repository
        self._state = InvitationState()
        # Fetches are numbered so a slow, older fetch cannot overwrite a newer one
        self._fetch_sequence = 0
        self._applied_sequence = 0
        self._subscriptions: set[ChangeSubscription] = set()
        self._refresh_user_id: UserId | None = None
        self._refresh_task: asyncio.Task | None = None

    @property
    def received_invitations(self) -> list[Invitation]:
        return list(self._state.received_invitations)

    @property
    def sent_invitations(self) -> list[Invitation]:
        return list(self._state.sent_invitations)

    @property
    def unread_count(self) -> int:
        return self._state.unread_count

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def active_subscriptions(self) -> int:
        return len(self._subscriptions)

    def snapshot(self) -> InvitationSnapshot:
        """Immutable copy of the current state."""
        return InvitationSnapshot(
            received_invitations=list(self._state.received_invitations),
            sent_invitations=list(self._state.sent_invitations),
            unread_count=self._state.unread_count,
            is_loading=self._state.is_loading,
        )

    async def fetch_invitations(self, user_id: UserId) -> OperationResult[InvitationSnapshot]:
        """Reload all invitations for a user and replace the state wholesale.

        Both directions are queried concurrently, then every counterpart
        profile is loaded in one batch. Invitations deleted in the store
        disappear from state. On failure the previous lists are kept.

        Args:
            user_id: The signed-in user

        Returns:
            The new snapshot, or a failure with the previous state intact
        """
        self._fetch_sequence += 1
        sequence = self._fetch_sequence

        with logfire.span(
            "invitation_engine.fetch_invitations",
            user_id=str(user_id),
            sequence=sequence,
        ):
            self._state.is_loading = True
            try:
                results = await asyncio.gather(
                    self.invitation_repository.list_invitations(as_recipient=user_id),
                    self.invitation_repository.list_invitations(as_sender=user_id),
                    return_exceptions=True,
                )
                for outcome in results:
                    if isinstance(outcome, BaseException):
                        raise outcome
                received, sent = results

                counterpart_ids = {inv.from_user_id for inv in received}
                counterpart_ids |= {inv.to_user_id for inv in sent}
                profiles = (
                    await self.profile_repository.list_profiles_by_ids(counterpart_ids)
                    if counterpart_ids
                    else {}
                )
            except DomainError as e:
                logfire.warn(
                    "Invitation fetch failed, keeping previous state",
                    user_id=str(user_id),
                    error=str(e),
                )
                return OperationResult.failure(ErrorKind.from_error(e), str(e))
            except Exception as e:
                logfire.error(
                    "Unexpected error fetching invitations",
                    user_id=str(user_id),
                    error=str(e),
                    _exc_info=True,
                )
                return OperationResult.failure(ErrorKind.TRANSIENT, str(e))
            finally:
                if sequence == self._fetch_sequence:
                    self._state.is_loading = False

            if sequence < self._applied_sequence:
                logfire.info(
                    "Discarding superseded invitation fetch",
                    user_id=str(user_id),
                    sequence=sequence,
                    applied=self._applied_sequence,
                )
                return OperationResult.success(self.snapshot(), message="superseded")

            self._applied_sequence = sequence
            self._state.received_invitations = [
                inv.model_copy(update={"from_profile": profiles.get(inv.from_user_id)})
                for inv in received
            ]
            self._state.sent_invitations = [
                inv.model_copy(update={"to_profile": profiles.get(inv.to_user_id)})
                for inv in sent
            ]
            self._state.unread_count = count_unread(self._state.received_invitations)

            logfire.info(
                "Invitations fetched",
                user_id=str(user_id),
                received=len(received),
                sent=len(sent),
                unread=self._state.unread_count,
            )
            return OperationResult.success(self.snapshot())

    async def send_invitation(
        self,
        from_user_id: UserId,
        to_user_id: UserId,
        hackathon_id: HackathonId | None = None,
        message: str | None = None,
    ) -> OperationResult[Invitation]:
        """Invite another user to team up.

        On success the sender's invitations are re-fetched before returning.
        A duplicate invitation yields a ``CONFLICT`` failure and leaves the
        state unchanged.

        Args:
            from_user_id: Sender (the signed-in user)
            to_user_id: Recipient
            hackathon_id: Optional hackathon context
            message: Optional note; empty strings are stored as no message

        Returns:
            The created invitation, or a typed failure
        """
        with logfire.span(
            "invitation_engine.send_invitation",
            from_user_id=str(from_user_id),
            to_user_id=str(to_user_id),
            hackathon_id=str(hackathon_id) if hackathon_id else None,
        ):
            if from_user_id == to_user_id:
                return OperationResult.failure(
                    ErrorKind.VALIDATION, "You cannot invite yourself."
                )

            try:
                invitation = await self.invitation_repository.create_invitation(
                    from_user_id, to_user_id, hackathon_id, message or None
                )
            except ConflictError:
                logfire.info(
                    "Invitation already exists",
                    from_user_id=str(from_user_id),
                    to_user_id=str(to_user_id),
                )
                return OperationResult.failure(ErrorKind.CONFLICT, ALREADY_INVITED_MESSAGE)
            except DomainError as e:
                logfire.warn(
                    "Failed to send invitation",
                    from_user_id=str(from_user_id),
                    to_user_id=str(to_user_id),
                    error=str(e),
                )
                return OperationResult.failure(ErrorKind.from_error(e), str(e))
            except Exception as e:
                logfire.error(
                    "Unexpected error sending invitation",
                    from_user_id=str(from_user_id),
                    to_user_id=str(to_user_id),
                    error=str(e),
                    _exc_info=True,
                )
                return OperationResult.failure(ErrorKind.TRANSIENT, str(e))

            await self.fetch_invitations(from_user_id)
            logfire.info(
                "Invitation sent",
                invitation_id=str(invitation.id),
                from_user_id=str(from_user_id),
                to_user_id=str(to_user_id),
            )
            return OperationResult.success(invitation)

    async def respond_to_invitation(
        self, invitation_id: InvitationId, status: InvitationStatus
    ) -> OperationResult[Invitation]:
        """Accept or decline a received invitation.

        Only the matching received entry is patched (no re-fetch) and the
        unread count is recomputed from the patched list.

        Args:
            invitation_id: Invitation to answer
            status: ACCEPTED or DECLINED

        Returns:
            The updated invitation, or a typed failure with state untouched
        """
        with logfire.span(
            "invitation_engine.respond_to_invitation",
            invitation_id=str(invitation_id),
            status=status.value,
        ):
            if not status.is_terminal:
                return OperationResult.failure(
                    ErrorKind.VALIDATION, "Invitations can only be accepted or declined."
                )

            try:
                updated = await self.invitation_repository.update_invitation_status(
                    invitation_id, status
                )
            except DomainError as e:
                logfire.warn(
                    "Failed to respond to invitation",
                    invitation_id=str(invitation_id),
                    status=status.value,
                    error=str(e),
                )
                return OperationResult.failure(ErrorKind.from_error(e), str(e))
            except Exception as e:
                logfire.error(
                    "Unexpected error responding to invitation",
                    invitation_id=str(invitation_id),
                    error=str(e),
                    _exc_info=True,
                )
                return OperationResult.failure(ErrorKind.TRANSIENT, str(e))

            self._state.received_invitations = [
                inv.model_copy(
                    update={"status": updated.status, "updated_at": updated.updated_at}
                )
                if inv.id == invitation_id
                else inv
                for inv in self._state.received_invitations
            ]
            self._state.unread_count = count_unread(self._state.received_invitations)

            logfire.info(
                "Invitation answered",
                invitation_id=str(invitation_id),
                status=status.value,
                unread=self._state.unread_count,
            )
            return OperationResult.success(updated)

    async def subscribe_to_invitations(
        self, user_id: UserId
    ) -> OperationResult[ChangeSubscription]:
        """Re-fetch automatically whenever the user's invitations change.

        Notification bursts are coalesced: while a refresh is running, further
        signals collapse into a single follow-up fetch.

        Args:
            user_id: The signed-in user

        Returns:
            A cancellation handle (safe to cancel more than once), or a
            ``SUBSCRIPTION`` failure
        """
        with logfire.span(
            "invitation_engine.subscribe_to_invitations", user_id=str(user_id)
        ):
            try:
                feed = await self.invitation_repository.subscribe_to_changes(
                    user_id, lambda: self._schedule_refresh(user_id)
                )
            except DomainError as e:
                logfire.error(
                    "Could not subscribe to invitation changes",
                    user_id=str(user_id),
                    error=str(e),
                )
                return OperationResult.failure(ErrorKind.SUBSCRIPTION, str(e))

            async def unsubscribe() -> None:
                self._subscriptions.discard(handle)
                try:
                    await feed.cancel()
                except Exception as e:
                    logfire.error(
                        "Failed to cancel invitation change feed",
                        user_id=str(user_id),
                        error=str(e),
                        _exc_info=True,
                    )
                if not self._subscriptions:
                    await self._cancel_refresh()
                logfire.info("Invitation subscription cancelled", user_id=str(user_id))

            handle = ChangeSubscription(unsubscribe)
            self._subscriptions.add(handle)
            return OperationResult.success(handle)

    async def wait_for_refresh(self) -> None:
        """Wait for a change-triggered refresh in progress, if any."""
        task = self._refresh_task
        if task is not None and not task.done():
            await asyncio.wait({task})

    async def close(self) -> None:
        """Cancel every subscription opened through this engine."""
        for subscription in list(self._subscriptions):
            await subscription.cancel()
        await self._cancel_refresh()

    def _schedule_refresh(self, user_id: UserId) -> None:
        self._refresh_user_id = user_id
        if self._refresh_task is None or self._refresh_task.done():
            self._refresh_task = asyncio.get_running_loop().create_task(
                self._drain_refreshes()
            )

    async def _drain_refreshes(self) -> None:
        while self._refresh_user_id is not None:
            user_id = self._refresh_user_id
            self._refresh_user_id = None
            await self.fetch_invitations(user_id)

    async def _cancel_refresh(self) -> None:
        self._refresh_user_id = None
        task = self._refresh_task
        if task is not None and not task.done():
            task.cancel()
            await asyncio.wait({task})
