"""In-memory post repository for testing."""

from typing import Optional

from board.domain.model.post import Post
from board.domain.repository.post import PostRepository
from board.domain.value import PostId

from .database import InMemoryDatabase


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._db.posts.get(post_id)

    async def find_by_id_for_update(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID (no locking needed in a single event loop)."""
        return self._db.posts.get(post_id)

    async def find_all(self, query: Optional[str] = None) -> list[Post]:
        """Find posts, newest first, optionally filtered by content."""
        posts = list(self._db.posts.values())

        if query:
            needle = query.lower()
            posts = [p for p in posts if needle in p.content.lower()]

        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts

    async def save(self, post: Post) -> Post:
        """Insert a post."""
        self._db.posts[post.id] = post
        return post

    async def update(self, post: Post) -> Post:
        """Overwrite a stored post."""
        if post.id in self._db.posts:
            self._db.posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post and, like the FK cascade, its engagement rows."""
        if self._db.posts.pop(post_id, None) is None:
            return False
        for key in [k for k in self._db.engagements if k[1] == post_id]:
            del self._db.engagements[key]
        return True
