"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from skillsphere.domain.model import Hackathon, Invitation, Profile
from skillsphere.domain.value import (
    Education,
    HackathonId,
    InvitationId,
    InvitationStatus,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model."""
    return Profile(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        email=row["email"],
        education=Education(row["education"]),
        skills=list(row.get("skills") or []),
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to a dict for insert/update."""
    return {
        "id": profile.id,
        "name": profile.name,
        "email": profile.email,
        "education": profile.education.value,
        "skills": profile.skills,
        "avatar_url": profile.avatar_url,
        "created_at": profile.created_at,
        "updated_at": profile.updated_at,
    }


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model (without profiles)."""
    hackathon_id = row.get("hackathon_id")
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        from_user_id=UserId(_uuid(row["from_user_id"])),
        to_user_id=UserId(_uuid(row["to_user_id"])),
        hackathon_id=HackathonId(_uuid(hackathon_id)) if hackathon_id else None,
        status=InvitationStatus(row["status"]),
        message=row.get("message"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_hackathon(row: Dict[str, Any]) -> Hackathon:
    """Convert database row to Hackathon domain model."""
    return Hackathon(
        id=HackathonId(_uuid(row["id"])),
        title=row["title"],
        status=row["status"],
        mode=row.get("mode") or "Online",
        skills_required=list(row.get("skills_required") or []),
        start_date=row["start_date"],
        end_date=row["end_date"],
        location=row.get("location"),
        max_team_size=row.get("max_team_size"),
    )
