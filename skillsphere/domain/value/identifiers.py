"""Strongly typed identifiers for SkillSphere entities.

Profile IDs double as user IDs: a profile is created for every registered
account and shares its primary key.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
InvitationId = NewType("InvitationId", UUID)
HackathonId = NewType("HackathonId", UUID)
