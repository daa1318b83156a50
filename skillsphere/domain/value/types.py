"""Domain value types for SkillSphere.

Enumerations and validated wrappers shared by the matching and invitation
subsystems.
"""

from enum import Enum

from pydantic import field_validator

from skillsphere.domain.value.common import RootValueObject, ValueObject


class InvitationStatus(str, Enum):
    """Lifecycle status of a team invitation.

    ``pending`` moves exactly once to ``accepted`` or ``declined``; both are
    terminal.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"

    @property
    def is_terminal(self) -> bool:
        return self is not InvitationStatus.PENDING

    def can_transition_to(self, target: "InvitationStatus") -> bool:
        """Check whether a stored status may be overwritten with ``target``.

        Re-applying the current status is allowed (a harmless no-op), so a
        retried response does not fail.
        """
        if target == self:
            return True
        return self is InvitationStatus.PENDING and target.is_terminal


class Education(str, Enum):
    """Education level declared on a profile."""

    BTECH = "BTech"
    MTECH = "MTech"
    BCA = "BCA"
    MCA = "MCA"
    BSC = "BSc"
    MSC = "MSc"
    OTHERS = "Others"


# Default skill vocabulary offered at sign-up, with display labels.
# Skills are free-form; anything outside this list is still accepted.
KNOWN_SKILLS: dict[str, str] = {
    "UI/UX": "UI/UX",
    "Frontend": "Frontend",
    "Backend": "Backend",
    "Full Stack": "Full Stack",
    "Web Development": "Web Development",
    "Cloud Computing": "Cloud Computing",
    "Blockchain": "Blockchain",
    "Artificial Intelligence": "AI",
    "Machine Learning": "ML",
}


def skill_label(skill: str) -> str:
    """Short display label for a skill, falling back to the skill itself."""
    return KNOWN_SKILLS.get(skill, skill)


class SkillName(RootValueObject[str]):
    """A single self-declared skill.

    Surrounding whitespace is stripped; the result must be 1-50 characters.
    """

    @field_validator("root")
    @classmethod
    def validate_skill(cls, v: str) -> str:
        """Strip and validate skill length."""
        v = v.strip()
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Skill must be 1-50 characters")
        return v


class MatchDenominator(str, Enum):
    """Denominator used when normalizing a skill overlap.

    MIN_OF_BOTH: teammate matching; a full subset scores 100.
    CANDIDATE_TOTAL: hackathon matching; share of the requirements covered.
    """

    MIN_OF_BOTH = "min_of_both"
    CANDIDATE_TOTAL = "candidate_total"


class MatchTier(str, Enum):
    """Coarse bucket for a match percentage."""

    STRONG = "strong"
    MODERATE = "moderate"
    WEAK = "weak"

    @classmethod
    def for_percentage(cls, percentage: int) -> "MatchTier":
        if percentage >= 80:
            return cls.STRONG
        if percentage >= 60:
            return cls.MODERATE
        return cls.WEAK


class UniquenessScope(str, Enum):
    """Scope of the one-invitation-per-ordered-pair rule.

    PAIR: a single invitation record may ever exist per (from, to).
    ACTIVE_PAIR: only non-declined invitations count, so a declined
    invitation can be followed by a new one.
    """

    PAIR = "pair"
    ACTIVE_PAIR = "active_pair"


class MatchResult(ValueObject):
    """Skill overlap between two profiles."""

    common_skills: list[str]
    match_percentage: int
