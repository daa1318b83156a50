"""initial_schema

Create the SkillSphere schema:
- Profiles (self-declared skills and education)
- Hackathons and enrollments
- Team invitations, with the ordered-pair uniqueness index and the
  NOTIFY trigger that feeds live invitation updates

The uniqueness index and the NOTIFY channel follow the settings in effect
when the migration runs (INVITATIONS__UNIQUENESS_SCOPE,
INVITATIONS__CHANGE_CHANNEL).

Revision ID: 3c1f9a7d2b64
Revises:
Create Date: 2026-10-19 10:12:44.318502

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from skillsphere.config import Settings
from skillsphere.domain.value import UniquenessScope


# revision identifiers, used by Alembic.
revision: str = "3c1f9a7d2b64"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    settings = Settings().invitations

    # ========================================================================
    # PROFILES table
    # ========================================================================
    op.create_table(
        "profiles",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column(
            "education", sa.String(20), nullable=False, server_default="Others"
        ),
        sa.Column(
            "skills",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "education IN ('BTech', 'MTech', 'BCA', 'MCA', 'BSc', 'MSc', 'Others')",
            name="ck_profiles_education",
        ),
    )
    op.create_index("idx_profiles_created_at", "profiles", ["created_at"])

    # ========================================================================
    # HACKATHONS table
    # ========================================================================
    op.create_table(
        "hackathons",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("mode", sa.String(20), nullable=False, server_default="Online"),
        sa.Column(
            "skills_required",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column("start_date", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("end_date", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("location", sa.Text(), nullable=True),
        sa.Column("max_team_size", sa.Integer(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_hackathons_status", "hackathons", ["status"])

    # ========================================================================
    # ENROLLMENTS table
    # ========================================================================
    op.create_table(
        "enrollments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("hackathon_id", sa.UUID(), nullable=False),
        sa.Column(
            "enrolled_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["hackathon_id"], ["hackathons.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "hackathon_id", name="uq_enrollment"),
    )

    # ========================================================================
    # TEAM_INVITATIONS table
    # ========================================================================
    op.create_table(
        "team_invitations",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("from_user_id", sa.UUID(), nullable=False),
        sa.Column("to_user_id", sa.UUID(), nullable=False),
        sa.Column("hackathon_id", sa.UUID(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("message", sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["from_user_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["to_user_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["hackathon_id"], ["hackathons.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('pending', 'accepted', 'declined')",
            name="ck_team_invitations_status",
        ),
        sa.CheckConstraint(
            "from_user_id <> to_user_id", name="ck_team_invitations_not_self"
        ),
    )
    op.execute("""
        CREATE INDEX idx_team_invitations_to_user
        ON team_invitations (to_user_id, created_at DESC)
    """)
    op.execute("""
        CREATE INDEX idx_team_invitations_from_user
        ON team_invitations (from_user_id, created_at DESC)
    """)

    # One invitation per ordered pair; with active_pair a declined invitation
    # no longer blocks a new one
    if settings.uniqueness_scope == UniquenessScope.ACTIVE_PAIR:
        op.execute("""
            CREATE UNIQUE INDEX uq_team_invitations_pair
            ON team_invitations (from_user_id, to_user_id)
            WHERE status <> 'declined'
        """)
    else:
        op.execute("""
            CREATE UNIQUE INDEX uq_team_invitations_pair
            ON team_invitations (from_user_id, to_user_id)
        """)

    # ========================================================================
    # TRIGGERS
    # ========================================================================

    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)

    op.execute("""
        CREATE TRIGGER update_profiles_updated_at
        BEFORE UPDATE ON profiles
        FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
    """)

    op.execute("""
        CREATE TRIGGER update_team_invitations_updated_at
        BEFORE UPDATE ON team_invitations
        FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
    """)

    # Change signal for live invitation updates (consumed via LISTEN)
    op.execute(f"""
        CREATE OR REPLACE FUNCTION notify_team_invitation_change()
        RETURNS TRIGGER AS $$
        BEGIN
            PERFORM pg_notify(
                '{settings.change_channel}',
                json_build_object(
                    'id', NEW.id,
                    'from_user_id', NEW.from_user_id,
                    'to_user_id', NEW.to_user_id,
                    'status', NEW.status
                )::text
            );
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)

    op.execute("""
        CREATE TRIGGER notify_team_invitations_change
        AFTER INSERT OR UPDATE ON team_invitations
        FOR EACH ROW EXECUTE FUNCTION notify_team_invitation_change()
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute(
        "DROP TRIGGER IF EXISTS notify_team_invitations_change ON team_invitations"
    )
    op.execute(
        "DROP TRIGGER IF EXISTS update_team_invitations_updated_at ON team_invitations"
    )
    op.execute("DROP TRIGGER IF EXISTS update_profiles_updated_at ON profiles")
    op.execute("DROP FUNCTION IF EXISTS notify_team_invitation_change()")
    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")

    op.drop_table("team_invitations")
    op.drop_table("enrollments")
    op.drop_index("idx_hackathons_status", table_name="hackathons")
    op.drop_table("hackathons")
    op.drop_index("idx_profiles_created_at", table_name="profiles")
    op.drop_table("profiles")
