"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when an invitation already exists for the ordered user pair."""

    def __init__(self, from_user_id: str, to_user_id: str):
        self.from_user_id = from_user_id
        self.to_user_id = to_user_id
        super().__init__(f"Invitation from {from_user_id} to {to_user_id} already exists")


class InvalidTransitionError(DomainError):
    """Raised when an invitation status change is not allowed."""

    def __init__(self, invitation_id: str, current: str, requested: str):
        self.invitation_id = invitation_id
        self.current = current
        self.requested = requested
        super().__init__(
            f"Invitation {invitation_id} cannot move from {current} to {requested}"
        )


class TransientError(DomainError):
    """Store or network unavailable; the operation may be retried."""

    pass


class SubscriptionError(DomainError):
    """The change feed could not be established or was lost."""

    pass
