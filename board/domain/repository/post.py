"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from board.domain.model.post import Post
from board.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID and lock it until the unit of work ends.

        Used by read-modify-write flows on the counters so that concurrent
        reactions on the same post are serialised.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, query: Optional[str] = None) -> List[Post]:
        """Find posts, optionally filtered by content.

        Args:
            query: Case-insensitive substring to match against content
                   (None for all posts)

        Returns:
            Matching posts, newest first
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert a new post.

        Args:
            post: The post to insert

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def update(self, post: Post) -> Post:
        """Overwrite the stored content, counters and timestamps of a post.

        Args:
            post: Post carrying the new state

        Returns:
            The updated post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete).

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted, False if none existed
        """
        pass
