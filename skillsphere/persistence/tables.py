"""SQLAlchemy table definitions for SkillSphere.

Used with SQLAlchemy Core; rows are mapped to pydantic domain models in
``mappers``. They match the schema created by the Alembic migrations.

The uniqueness rule on team_invitations (from_user_id, to_user_id) is not
declared here: its scope is a deployment setting
(``INVITATIONS__UNIQUENESS_SCOPE``) and the migration renders it as either a
plain or a partial unique index.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# PROFILES TABLE (one row per registered account, id = auth user id)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(100), nullable=False),
    Column("email", String(255), nullable=False),
    Column("education", String(20), nullable=False, server_default="Others"),
    Column("skills", ARRAY(Text), nullable=False, server_default=text("'{}'")),
    Column("avatar_url", Text, nullable=True),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

Index("idx_profiles_created_at", profiles_table.c.created_at)

# ============================================================================
# HACKATHONS TABLE
# ============================================================================
hackathons_table = Table(
    "hackathons",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("title", String(200), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("status", String(20), nullable=False),  # 'Upcoming', 'Ongoing', 'Completed'
    Column("mode", String(20), nullable=False, server_default="Online"),
    Column("skills_required", ARRAY(Text), nullable=False, server_default=text("'{}'")),
    Column("start_date", TIMESTAMP(timezone=True), nullable=False),
    Column("end_date", TIMESTAMP(timezone=True), nullable=False),
    Column("location", Text, nullable=True),
    Column("max_team_size", Integer, nullable=True),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

Index("idx_hackathons_status", hackathons_table.c.status)

# ============================================================================
# ENROLLMENTS TABLE
# ============================================================================
enrollments_table = Table(
    "enrollments",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column(
        "user_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "hackathon_id",
        UUID,
        ForeignKey("hackathons.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "enrolled_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    UniqueConstraint("user_id", "hackathon_id", name="uq_enrollment"),
)

# ============================================================================
# TEAM INVITATIONS TABLE
# ============================================================================
team_invitations_table = Table(
    "team_invitations",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column(
        "from_user_id",
        UUID,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "to_user_id",
        UUID,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "hackathon_id",
        UUID,
        ForeignKey("hackathons.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("message", Text, nullable=True),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    CheckConstraint(
        "status IN ('pending', 'accepted', 'declined')",
        name="ck_team_invitations_status",
    ),
    CheckConstraint("from_user_id <> to_user_id", name="ck_team_invitations_not_self"),
)

Index(
    "idx_team_invitations_to_user",
    team_invitations_table.c.to_user_id,
    team_invitations_table.c.created_at.desc(),
)
Index(
    "idx_team_invitations_from_user",
    team_invitations_table.c.from_user_id,
    team_invitations_table.c.created_at.desc(),
)
