"""Typed outcomes for invitation engine operations."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from skillsphere.domain.error import (
    ConflictError,
    DomainError,
    InvalidTransitionError,
    NotFoundError,
    SubscriptionError,
    ValidationError,
)

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Why an engine operation failed."""

    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    INVALID_TRANSITION = "invalid_transition"
    VALIDATION = "validation"
    TRANSIENT = "transient"
    SUBSCRIPTION = "subscription"

    @classmethod
    def from_error(cls, error: DomainError) -> "ErrorKind":
        if isinstance(error, ConflictError):
            return cls.CONFLICT
        if isinstance(error, NotFoundError):
            return cls.NOT_FOUND
        if isinstance(error, InvalidTransitionError):
            return cls.INVALID_TRANSITION
        if isinstance(error, ValidationError):
            return cls.VALIDATION
        if isinstance(error, SubscriptionError):
            return cls.SUBSCRIPTION
        return cls.TRANSIENT


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Success or typed failure of an engine operation.

    Truthy on success, so callers that only care about the boolean outcome
    can write ``if await engine.send_invitation(...)``.
    """

    ok: bool
    value: T | None = None
    error: ErrorKind | None = None
    message: str | None = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, value: T | None = None, message: str | None = None) -> "OperationResult[T]":
        return cls(ok=True, value=value, message=message)

    @classmethod
    def failure(cls, error: ErrorKind, message: str | None = None) -> "OperationResult[T]":
        return cls(ok=False, error=error, message=message)
