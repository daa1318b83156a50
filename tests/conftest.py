"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from skillsphere.domain.model import Hackathon, Profile
from skillsphere.domain.value import Education, HackathonId, UserId

_EPOCH = datetime(2025, 1, 1, 12, 0, 0)
_counter = 0


def make_profile(
    name: str,
    skills: list[str],
    education: Education = Education.BTECH,
    user_id: UserId | None = None,
) -> Profile:
    """Helper to build a profile for tests.

    Each call gets a later ``created_at`` so candidate order follows call order.
    """
    global _counter
    _counter += 1
    created_at = _EPOCH + timedelta(seconds=_counter)
    return Profile(
        id=user_id or UserId(uuid4()),
        name=name,
        email=f"{name.lower().replace(' ', '.')}@example.com",
        education=education,
        skills=skills,
        created_at=created_at,
        updated_at=created_at,
    )


def make_hackathon(
    title: str,
    skills_required: list[str],
    status: str = "Upcoming",
    days_from_now: int = 7,
) -> Hackathon:
    """Helper to build a hackathon for tests."""
    start = datetime.now() + timedelta(days=days_from_now)
    return Hackathon(
        id=HackathonId(uuid4()),
        title=title,
        status=status,
        skills_required=skills_required,
        start_date=start,
        end_date=start + timedelta(days=2),
    )
