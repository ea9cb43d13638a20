"""Domain model entities for postboard."""

from board.domain.model.engagement import Engagement
from board.domain.model.post import Post
from board.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Engagement",
]
