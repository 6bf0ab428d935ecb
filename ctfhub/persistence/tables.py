"""SQLAlchemy table definitions for CTF Hub.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("username", String(64), nullable=False),
    Column("email", String(255), nullable=True),
    Column("is_admin", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_username", users_table.c.username)

# ============================================================================
# TEAMS TABLE
# ============================================================================
teams_table = Table(
    "teams",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(64), nullable=False, unique=True),  # Stored lower-cased
    Column(
        "owner_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("twitter", Text, nullable=True),
    Column("website", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_teams_owner_id", teams_table.c.owner_id)

# ============================================================================
# TEAM MEMBERS TABLE (members other than the owner, in join order)
# ============================================================================
team_members_table = Table(
    "team_members",
    metadata,
    Column(
        "team_id",
        UUID(as_uuid=True),
        ForeignKey("teams.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("position", Integer, nullable=False),
    PrimaryKeyConstraint("team_id", "user_id", name="pk_team_members"),
)

Index("idx_team_members_user_id", team_members_table.c.user_id)

# ============================================================================
# USER TEAMS TABLE (a user's memberships, in join order)
# ============================================================================
user_teams_table = Table(
    "user_teams",
    metadata,
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "team_id",
        UUID(as_uuid=True),
        ForeignKey("teams.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("position", Integer, nullable=False),
    PrimaryKeyConstraint("user_id", "team_id", name="pk_user_teams"),
)

Index("idx_user_teams_team_id", user_teams_table.c.team_id)

# ============================================================================
# INVITES TABLE
# ============================================================================
invites_table = Table(
    "invites",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("code", String(64), nullable=False, unique=True),
    Column(
        "team_id",
        UUID(as_uuid=True),
        ForeignKey("teams.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_by",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("expiry", TIMESTAMP(timezone=True), nullable=True),
    Column("max_uses", Integer, nullable=True),
)

Index("idx_invites_team_id", invites_table.c.team_id)

# ============================================================================
# INVITE USES TABLE (redeeming users, in redemption order)
# ============================================================================
invite_uses_table = Table(
    "invite_uses",
    metadata,
    Column(
        "invite_id",
        UUID(as_uuid=True),
        ForeignKey("invites.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("position", Integer, nullable=False),
    PrimaryKeyConstraint("invite_id", "user_id", name="pk_invite_uses"),
)

# ============================================================================
# CTFS TABLE
# ============================================================================
ctfs_table = Table(
    "ctfs",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "team_id",
        UUID(as_uuid=True),
        ForeignKey("teams.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("name", String(100), nullable=False),
    Column("description", Text, nullable=True),
    Column("archived", Boolean, nullable=False, server_default="false"),
    Column(
        "created_by",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_ctfs_team_id_created_at", ctfs_table.c.team_id, ctfs_table.c.created_at)
