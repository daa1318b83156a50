"""Domain model entities for SkillSphere."""

from skillsphere.domain.model.hackathon import Hackathon, RecommendedHackathon
from skillsphere.domain.model.invitation import Invitation
from skillsphere.domain.model.match import MatchedProfile
from skillsphere.domain.model.profile import Profile
from skillsphere.domain.model.snapshot import InvitationSnapshot

__all__ = [
    "Hackathon",
    "Invitation",
    "InvitationSnapshot",
    "MatchedProfile",
    "Profile",
    "RecommendedHackathon",
]
