"""Engagement repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from board.domain.model.engagement import Engagement
from board.domain.value import PostId, UserId


class EngagementRepository(ABC):
    """Repository for like/dislike rows.

    At most one row exists per (user_id, post_id).
    """

    @abstractmethod
    async def find(self, user_id: UserId, post_id: PostId) -> Optional[Engagement]:
        """Find a user's engagement on a post.

        Args:
            user_id: The user's ID
            post_id: The post's ID

        Returns:
            The engagement if the user has reacted, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, engagement: Engagement) -> Engagement:
        """Insert a new engagement row.

        Raises:
            ConflictError: If a row already exists for this user and post
        """
        pass

    @abstractmethod
    async def update(self, engagement: Engagement) -> Engagement:
        """Change the reaction stored on an existing row.

        Args:
            engagement: Row carrying the new reaction

        Returns:
            The updated engagement
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId, post_id: PostId) -> bool:
        """Delete a user's engagement on a post.

        Returns:
            True if a row was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every engagement on a post.

        Args:
            post_id: The post's ID

        Returns:
            Number of rows deleted
        """
        pass
