"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from board.domain.model import Engagement, Post, User
from board.domain.value import PostId, Reaction, UserId, UserRole
from board.domain.value.types import DisplayName, Email


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        name=DisplayName(row["name"]),
        email=Email(row["email"]),
        password_hash=row["password_hash"],
        role=UserRole(row["role"]),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": str(user.id),
        "name": user.name.root,
        "email": user.email.root,
        "password_hash": user.password_hash,
        "role": user.role.value,
        "created_at": user.created_at,
    }


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        content=row["content"],
        likes=row["likes"],
        dislikes=row["dislikes"],
        creator_id=UserId(row["creator_id"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": str(post.id),
        "creator_id": str(post.creator_id),
        "content": post.content,
        "likes": post.likes,
        "dislikes": post.dislikes,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


def row_to_engagement(row: Dict[str, Any]) -> Engagement:
    """Convert database row to Engagement domain model."""
    return Engagement(
        user_id=UserId(row["user_id"]),
        post_id=PostId(row["post_id"]),
        reaction=Reaction(row["reaction"]),
    )


def engagement_to_dict(engagement: Engagement) -> Dict[str, Any]:
    return {
        "user_id": str(engagement.user_id),
        "post_id": str(engagement.post_id),
        "reaction": engagement.reaction.value,
    }
