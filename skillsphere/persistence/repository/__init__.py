"""PostgreSQL repository implementations."""

from skillsphere.persistence.repository.hackathon import PostgresHackathonRepository
from skillsphere.persistence.repository.invitation import PostgresInvitationRepository
from skillsphere.persistence.repository.profile import PostgresProfileRepository

__all__ = [
    "PostgresHackathonRepository",
    "PostgresInvitationRepository",
    "PostgresProfileRepository",
]
