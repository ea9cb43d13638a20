"""SQLAlchemy table definitions for postboard.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
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
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(100), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column("role", String(20), nullable=False, server_default="NORMAL"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("role IN ('NORMAL', 'ADMIN')", name="valid_user_role"),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", String(64), primary_key=True),
    Column(
        "creator_id",
        String(64),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column("dislikes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("likes >= 0", name="likes_non_negative"),
    CheckConstraint("dislikes >= 0", name="dislikes_non_negative"),
    CheckConstraint("updated_at >= created_at", name="updated_after_created"),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_creator_id", posts_table.c.creator_id)

# ============================================================================
# POST_ENGAGEMENTS TABLE (one row per user and post)
# ============================================================================
post_engagements_table = Table(
    "post_engagements",
    metadata,
    Column(
        "user_id", String(64), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "post_id", String(64), ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("reaction", String(10), nullable=False),
    PrimaryKeyConstraint("user_id", "post_id", name="pk_post_engagements"),
    CheckConstraint("reaction IN ('like', 'dislike')", name="valid_reaction"),
)

Index("idx_post_engagements_post_id", post_engagements_table.c.post_id)
