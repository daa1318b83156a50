"""Skill overlap scoring.

Pure functions shared by teammate matching and hackathon recommendation.
"""

from collections.abc import Iterable

from skillsphere.domain.value import MatchDenominator, MatchResult


def round_half_up(numerator: int, denominator: int) -> int:
    """Round ``numerator / denominator`` to the nearest integer, halves up.

    Integer arithmetic keeps 2/3 -> 67 and 1/2 -> 1 exact (no banker's rounding).
    """
    return (2 * numerator + denominator) // (2 * denominator)


def compute_match(
    viewer_skills: Iterable[str],
    candidate_skills: Iterable[str],
    denominator: MatchDenominator = MatchDenominator.MIN_OF_BOTH,
) -> MatchResult:
    """Compute the skill overlap between a viewer and a candidate.

    ``common_skills`` keeps the candidate's ordering. With MIN_OF_BOTH the
    percentage is normalized by the smaller skill set, so a full subset scores
    100 regardless of the other side's size. With CANDIDATE_TOTAL it is the
    share of the candidate's skills (e.g. a hackathon's requirements) covered.
    An empty denominator yields 0.

    Args:
        viewer_skills: Skills of the user looking for matches
        candidate_skills: Skills of the candidate (profile or hackathon)
        denominator: Normalization strategy

    Returns:
        Common skills and a 0-100 match percentage
    """
    viewer = set(viewer_skills)
    candidate = list(dict.fromkeys(candidate_skills))
    common = [skill for skill in candidate if skill in viewer]

    if denominator == MatchDenominator.MIN_OF_BOTH:
        total = min(len(candidate), len(viewer))
    else:
        total = len(candidate)

    percentage = round_half_up(100 * len(common), total) if total else 0
    return MatchResult(common_skills=common, match_percentage=percentage)
