"""Invitation repository interface."""

from abc import ABC, abstractmethod

from skillsphere.domain.model.invitation import Invitation
from skillsphere.domain.repository.subscription import ChangeListener, ChangeSubscription
from skillsphere.domain.value import HackathonId, InvitationId, InvitationStatus, UserId


class InvitationRepository(ABC):
    """Repository for team invitations.

    Defines the contract for invitation persistence and change notification.
    Implementations live in the persistence layer and translate store
    failures into domain errors.
    """

    @abstractmethod
    async def list_invitations(
        self,
        as_sender: UserId | None = None,
        as_recipient: UserId | None = None,
    ) -> list[Invitation]:
        """List invitations filtered by sender and/or recipient.

        Args:
            as_sender: Only invitations sent by this user
            as_recipient: Only invitations received by this user

        Returns:
            Invitations ordered newest-first by created_at

        Raises:
            TransientError: If the store is unavailable
        """
        pass

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def create_invitation(
        self,
        from_user_id: UserId,
        to_user_id: UserId,
        hackathon_id: HackathonId | None = None,
        message: str | None = None,
    ) -> Invitation:
        """Insert a new pending invitation.

        Args:
            from_user_id: Sender
            to_user_id: Recipient
            hackathon_id: Optional hackathon context
            message: Optional note for the recipient

        Returns:
            The created invitation

        Raises:
            ConflictError: If the ordered pair violates the uniqueness rule
            TransientError: If the store is unavailable
        """
        pass

    @abstractmethod
    async def update_invitation_status(
        self, invitation_id: InvitationId, status: InvitationStatus
    ) -> Invitation:
        """Set an invitation's status.

        The update only applies while the stored status is pending (or already
        equal to ``status``), so two racing responses cannot both win.

        Args:
            invitation_id: Invitation to update
            status: New status

        Returns:
            The updated invitation

        Raises:
            NotFoundError: If no invitation has this ID
            InvalidTransitionError: If the invitation was already answered differently
            TransientError: If the store is unavailable
        """
        pass

    @abstractmethod
    async def subscribe_to_changes(
        self, user_id: UserId, on_change: ChangeListener
    ) -> ChangeSubscription:
        """Subscribe to invitation inserts/updates involving a user.

        ``on_change`` fires for any change where the user is sender or
        recipient. Delivery is at-least-once and unordered; consumers must
        re-fetch.

        Args:
            user_id: User whose invitations to watch
            on_change: Callback invoked without arguments

        Returns:
            Cancellation handle

        Raises:
            SubscriptionError: If the change feed cannot be established
        """
        pass
