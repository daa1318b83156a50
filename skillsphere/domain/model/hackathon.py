"""Hackathon entity (read-only from this service's point of view)."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from skillsphere.domain.model.common import DomainModel
from skillsphere.domain.value import HackathonId, MatchResult


class Hackathon(DomainModel):
    """A hackathon listing."""

    id: HackathonId
    title: str
    status: str  # 'Upcoming', 'Ongoing', 'Completed'
    mode: str = "Online"
    skills_required: list[str] = Field(default_factory=list)
    start_date: datetime
    end_date: datetime
    location: Optional[str] = None
    max_team_size: Optional[int] = None


class RecommendedHackathon(DomainModel):
    """A hackathon paired with how much of its requirements a user covers."""

    hackathon: Hackathon
    match: MatchResult
