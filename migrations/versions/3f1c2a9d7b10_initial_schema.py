"""initial_schema

Create the postboard schema:
- Users (email/password accounts with a NORMAL or ADMIN role)
- Posts (text content with like and dislike counters)
- Post engagements (one like or dislike per user and post)

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 13:20:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False, server_default="NORMAL"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.CheckConstraint("role IN ('NORMAL', 'ADMIN')", name="valid_user_role"),
    )

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("creator_id", sa.String(64), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("dislikes", sa.Integer(), nullable=False, server_default="0"),
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
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["creator_id"], ["users.id"], ondelete="CASCADE"),
        sa.CheckConstraint("likes >= 0", name="likes_non_negative"),
        sa.CheckConstraint("dislikes >= 0", name="dislikes_non_negative"),
        sa.CheckConstraint("updated_at >= created_at", name="updated_after_created"),
    )
    op.create_index("idx_posts_created_at", "posts", [sa.text("created_at DESC")])
    op.create_index("idx_posts_creator_id", "posts", ["creator_id"])

    # ========================================================================
    # POST_ENGAGEMENTS table
    # ========================================================================
    op.create_table(
        "post_engagements",
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("post_id", sa.String(64), nullable=False),
        sa.Column("reaction", sa.String(10), nullable=False),
        sa.PrimaryKeyConstraint("user_id", "post_id", name="pk_post_engagements"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.CheckConstraint("reaction IN ('like', 'dislike')", name="valid_reaction"),
    )
    op.create_index(
        "idx_post_engagements_post_id", "post_engagements", ["post_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_post_engagements_post_id", table_name="post_engagements")
    op.drop_table("post_engagements")
    op.drop_index("idx_posts_creator_id", table_name="posts")
    op.drop_index("idx_posts_created_at", table_name="posts")
    op.drop_table("posts")
    op.drop_table("users")
