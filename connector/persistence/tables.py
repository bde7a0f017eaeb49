"""SQLAlchemy table definitions for Dev Connector.

They match the schema defined in Alembic migrations. Embedded documents
(profile skills/social/experience/education, post likes/comments) are
stored as JSONB.
"""

from sqlalchemy import Column, ForeignKey, Index, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column("avatar", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# PROFILES TABLE (one per user)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "user_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    ),
    Column("handle", String(40), nullable=True),
    Column("company", String(255), nullable=True),
    Column("website", Text, nullable=True),
    Column("location", String(255), nullable=True),
    Column("bio", Text, nullable=True),
    Column("status", String(255), nullable=False),
    Column("github_username", String(255), nullable=True),
    Column("skills", JSONB, nullable=False, server_default="[]"),
    Column("social", JSONB, nullable=False, server_default="{}"),
    Column("experience", JSONB, nullable=False, server_default="[]"),
    Column("education", JSONB, nullable=False, server_default="[]"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_profiles_handle", profiles_table.c.handle)

# ============================================================================
# POSTS TABLE
# ============================================================================
# Author is a plain reference: posts outlive their author's account.
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("user_id", UUID, nullable=False),
    Column("text", Text, nullable=False),
    Column("name", String(255), nullable=False),
    Column("avatar", Text, nullable=True),
    Column("likes", JSONB, nullable=False, server_default="[]"),
    Column("comments", JSONB, nullable=False, server_default="[]"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_user_id", posts_table.c.user_id)
Index("idx_posts_created_at", posts_table.c.created_at.desc())
