"""Teammate match list construction."""

from collections.abc import Iterable, Sequence

from skillsphere.domain.model import Invitation, MatchedProfile, Profile
from skillsphere.domain.service.skill_matcher import compute_match
from skillsphere.domain.value import Education, InvitationStatus, MatchDenominator, UserId


def build_matches(
    viewer: Profile,
    candidates: Iterable[Profile],
    sent_invitations: Sequence[Invitation],
) -> list[MatchedProfile]:
    """Rank candidates by skill overlap with the viewer.

    The viewer is never matched with themselves, candidates sharing no skill
    are dropped, and the rest are ordered by match percentage (highest first,
    ties keep input order). ``already_invited`` is set when the viewer has a
    non-declined invitation out to the candidate.

    Args:
        viewer: Profile of the user looking for teammates
        candidates: Candidate pool
        sent_invitations: Invitations the viewer has sent

    Returns:
        Ranked, annotated candidates
    """
    invited: set[UserId] = {
        inv.to_user_id
        for inv in sent_invitations
        if inv.status != InvitationStatus.DECLINED
    }

    matches: list[MatchedProfile] = []
    for candidate in candidates:
        if candidate.id == viewer.id:
            continue
        result = compute_match(
            viewer.skills, candidate.skills, MatchDenominator.MIN_OF_BOTH
        )
        if not result.common_skills:
            continue
        matches.append(
            MatchedProfile(
                profile=candidate,
                match_percentage=result.match_percentage,
                common_skills=result.common_skills,
                already_invited=candidate.id in invited,
            )
        )

    # list.sort is stable, so equal percentages keep candidate order
    matches.sort(key=lambda m: m.match_percentage, reverse=True)
    return matches


def filter_matches(
    matches: Iterable[MatchedProfile],
    search: str | None = None,
    education: Education | None = None,
) -> list[MatchedProfile]:
    """Narrow a match list by free-text search and education level.

    Search is a case-insensitive substring match on the name or any skill.
    """
    needle = (search or "").strip().lower()
    filtered = []
    for match in matches:
        profile = match.profile
        if needle and not (
            needle in profile.name.lower()
            or any(needle in skill.lower() for skill in profile.skills)
        ):
            continue
        if education is not None and profile.education != education:
            continue
        filtered.append(match)
    return filtered


def count_high_matches(matches: Iterable[MatchedProfile], threshold: int) -> int:
    """Number of matches at or above ``threshold`` percent."""
    return sum(1 for m in matches if m.match_percentage >= threshold)
