"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Post
from board.domain.repository.post import PostRepository
from board.domain.value import PostId
from board.persistence.mappers import post_to_dict, row_to_post
from board.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_by_id_for_update(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID and hold a row lock until the transaction ends."""
        stmt = (
            select(posts_table).where(posts_table.c.id == post_id).with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_all(self, query: Optional[str] = None) -> List[Post]:
        """Find posts, newest first, optionally filtered by content."""
        stmt = select(posts_table)

        if query:
            stmt = stmt.where(
                func.lower(posts_table.c.content).contains(
                    query.lower(), autoescape=True
                )
            )

        stmt = stmt.order_by(desc(posts_table.c.created_at))
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Insert a new post."""
        stmt = insert(posts_table).values(**post_to_dict(post))
        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def update(self, post: Post) -> Post:
        """Overwrite content, counters and timestamps of an existing post."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post.id)
            .values(
                content=post.content,
                likes=post.likes,
                dislikes=post.dislikes,
                updated_at=post.updated_at,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Hard delete a post. Engagement rows go with it (FK cascade)."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
