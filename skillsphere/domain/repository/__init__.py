"""Repository interfaces for the SkillSphere domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from skillsphere.domain.repository.hackathon import HackathonRepository
from skillsphere.domain.repository.invitation import InvitationRepository
from skillsphere.domain.repository.profile import ProfileRepository
from skillsphere.domain.repository.subscription import ChangeListener, ChangeSubscription

__all__ = [
    "ChangeListener",
    "ChangeSubscription",
    "HackathonRepository",
    "InvitationRepository",
    "ProfileRepository",
]
