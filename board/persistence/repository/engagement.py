"""PostgreSQL implementation of Engagement repository."""

from typing import Optional

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.error import ConflictError
from board.domain.model import Engagement
from board.domain.repository import EngagementRepository
from board.domain.value import PostId, UserId
from board.persistence.mappers import engagement_to_dict, row_to_engagement
from board.persistence.tables import post_engagements_table


class PostgresEngagementRepository(EngagementRepository):
    """PostgreSQL implementation of EngagementRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _key(self, user_id: UserId, post_id: PostId):
        return and_(
            post_engagements_table.c.user_id == user_id,
            post_engagements_table.c.post_id == post_id,
        )

    async def find(self, user_id: UserId, post_id: PostId) -> Optional[Engagement]:
        """Find a user's engagement on a post."""
        stmt = select(post_engagements_table).where(self._key(user_id, post_id))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_engagement(row._asdict()) if row else None

    async def save(self, engagement: Engagement) -> Engagement:
        """Insert an engagement row."""
        stmt = insert(post_engagements_table).values(**engagement_to_dict(engagement))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError:
            raise ConflictError(
                f"User {engagement.user_id} already reacted to post {engagement.post_id}"
            )
        return engagement

    async def update(self, engagement: Engagement) -> Engagement:
        """Change the reaction stored on an existing row."""
        stmt = (
            update(post_engagements_table)
            .where(self._key(engagement.user_id, engagement.post_id))
            .values(reaction=engagement.reaction.value)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return engagement

    async def delete(self, user_id: UserId, post_id: PostId) -> bool:
        """Delete a user's engagement on a post."""
        stmt = delete(post_engagements_table).where(self._key(user_id, post_id))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every engagement on a post."""
        stmt = delete(post_engagements_table).where(
            post_engagements_table.c.post_id == post_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
