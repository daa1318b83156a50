"""In-memory repository implementations for testing."""

from .hackathon import InMemoryHackathonRepository
from .invitation import InMemoryInvitationRepository
from .profile import InMemoryProfileRepository

__all__ = [
    "InMemoryHackathonRepository",
    "InMemoryInvitationRepository",
    "InMemoryProfileRepository",
]
