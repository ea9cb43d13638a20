"""In-memory engagement repository for testing."""

from typing import Optional

from board.domain.error import ConflictError
from board.domain.model.engagement import Engagement
from board.domain.repository.engagement import EngagementRepository
from board.domain.value import PostId, UserId

from .database import InMemoryDatabase


class InMemoryEngagementRepository(EngagementRepository):
    """In-memory implementation of EngagementRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find(self, user_id: UserId, post_id: PostId) -> Optional[Engagement]:
        """Find a user's engagement on a post."""
        return self._db.engagements.get((user_id, post_id))

    async def save(self, engagement: Engagement) -> Engagement:
        """Insert an engagement.

        Raises:
            ConflictError: If the user already reacted to the post
        """
        key = (engagement.user_id, engagement.post_id)
        if key in self._db.engagements:
            raise ConflictError(
                f"User {engagement.user_id} already reacted to post {engagement.post_id}"
            )
        self._db.engagements[key] = engagement
        return engagement

    async def update(self, engagement: Engagement) -> Engagement:
        """Replace the reaction on an existing row."""
        key = (engagement.user_id, engagement.post_id)
        if key in self._db.engagements:
            self._db.engagements[key] = engagement
        return engagement

    async def delete(self, user_id: UserId, post_id: PostId) -> bool:
        """Delete a user's engagement on a post."""
        return self._db.engagements.pop((user_id, post_id), None) is not None

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every engagement on a post."""
        keys = [k for k in self._db.engagements if k[1] == post_id]
        for key in keys:
            del self._db.engagements[key]
        return len(keys)
