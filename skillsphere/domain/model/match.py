"""Matched teammate candidate (derived, never persisted)."""

from skillsphere.domain.model.common import DomainModel
from skillsphere.domain.model.profile import Profile
from skillsphere.domain.value import MatchTier


class MatchedProfile(DomainModel):
    """A candidate profile annotated with its overlap against the viewer."""

    profile: Profile
    match_percentage: int
    common_skills: list[str]
    already_invited: bool = False

    @property
    def tier(self) -> MatchTier:
        return MatchTier.for_percentage(self.match_percentage)
