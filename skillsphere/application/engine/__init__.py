"""Invitation engine."""

from skillsphere.application.engine.invitation_engine import (
    ALREADY_INVITED_MESSAGE,
    InvitationEngine,
    InvitationState,
    count_unread,
)
from skillsphere.application.engine.registry import InvitationEngineRegistry
from skillsphere.application.engine.result import ErrorKind, OperationResult

__all__ = [
    "ALREADY_INVITED_MESSAGE",
    "ErrorKind",
    "InvitationEngine",
    "InvitationEngineRegistry",
    "InvitationState",
    "OperationResult",
    "count_unread",
]
