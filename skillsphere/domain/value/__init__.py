"""Domain value objects for SkillSphere."""

from skillsphere.domain.value.identifiers import HackathonId, InvitationId, UserId
from skillsphere.domain.value.types import (
    KNOWN_SKILLS,
    Education,
    InvitationStatus,
    MatchDenominator,
    MatchResult,
    MatchTier,
    SkillName,
    UniquenessScope,
    skill_label,
)

__all__ = [
    # Identifiers
    "UserId",
    "InvitationId",
    "HackathonId",
    # Types
    "Education",
    "InvitationStatus",
    "KNOWN_SKILLS",
    "MatchDenominator",
    "MatchResult",
    "MatchTier",
    "SkillName",
    "UniquenessScope",
    "skill_label",
]
