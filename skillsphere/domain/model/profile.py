"""Profile entity.

A profile is created when an account registers and is only ever changed by
its owner. Skills are self-declared and free-form.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from skillsphere.domain.model.common import DomainModel
from skillsphere.domain.value import Education, UserId


class Profile(DomainModel):
    """User profile with self-declared skills."""

    id: UserId
    name: str
    email: str
    education: Education = Education.OTHERS
    skills: list[str] = Field(default_factory=list)
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
