"""Post domain service."""

from typing import Optional

import logfire

from board.domain.error import DataIntegrityError, NotAuthorizedError, NotFoundError
from board.domain.model import Post, User
from board.domain.model.common import utc_now
from board.domain.repository import EngagementRepository, PostRepository, UserRepository
from board.domain.value import AuthPayload, CreatorSummary, PostId, UserId

from .base import Service
from .id_generator import IdGenerator
from .policy import can_mutate


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        engagement_repository: EngagementRepository,
        user_repository: UserRepository,
        id_generator: IdGenerator,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            engagement_repository: Engagement repository
            user_repository: User repository
            id_generator: Generator for new post IDs
        """
        self.post_repository = post_repository
        self.engagement_repository = engagement_repository
        self.user_repository = user_repository
        self.id_generator = id_generator

    async def list_with_creators(
        self, query: Optional[str] = None
    ) -> list[tuple[Post, CreatorSummary]]:
        """List posts joined with a summary of their creator.

        Creators are fetched in one batch and indexed by ID. A post whose
        creator cannot be found is logged and left out of the result.

        Args:
            query: Optional case-insensitive substring filter on content

        Returns:
            (post, creator) pairs, newest first
        """
        with logfire.span("post_service.list_with_creators", query=query):
            posts = await self.post_repository.find_all(query)

            creator_ids = list({post.creator_id for post in posts})
            users = await self.user_repository.find_by_ids(creator_ids)
            creators = {user.id: self._summarize(user) for user in users}

            rows = []
            for post in posts:
                try:
                    rows.append((post, self._creator_for(post, creators)))
                except DataIntegrityError as e:
                    logfire.error(
                        "Skipping post with missing creator",
                        post_id=str(post.id),
                        creator_id=str(post.creator_id),
                        error=e.message,
                    )

            logfire.info(
                "Posts listed", count=len(rows), skipped=len(posts) - len(rows)
            )
            return rows

    async def get_existing(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.get_existing", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def create(self, content: str, creator_id: UserId) -> Post:
        """Create a post owned by the given user.

        Args:
            content: Post text (non-empty)
            creator_id: Owner of the new post

        Returns:
            Saved post with zeroed counters
        """
        now = utc_now()
        post = Post(
            id=PostId(self.id_generator.generate()),
            content=content,
            likes=0,
            dislikes=0,
            creator_id=creator_id,
            created_at=now,
            updated_at=now,
        )

        with logfire.span(
            "post_service.create", post_id=str(post.id), creator_id=str(creator_id)
        ):
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def update_content(
        self, post_id: PostId, content: str, caller: AuthPayload
    ) -> Post:
        """Replace a post's content.

        Only the creator may edit; the ADMIN role grants no override here.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the caller did not create the post
            ValidationError: If content is empty
        """
        with logfire.span(
            "post_service.update_content",
            post_id=str(post_id),
            user_id=str(caller.id),
            content_length=len(content),
        ):
            post = await self.get_existing(post_id)

            if not can_mutate(post, caller, admin_override=False):
                logfire.warn(
                    "Unauthorized post edit attempt",
                    post_id=str(post_id),
                    user_id=str(caller.id),
                    creator_id=str(post.creator_id),
                )
                raise NotAuthorizedError("edit", "post", str(post_id), str(caller.id))

            updated = post.set_content(content).set_updated_at(utc_now())
            saved = await self.post_repository.update(updated)
            logfire.info("Post content updated", post_id=str(post_id))
            return saved

    async def delete_post(self, post_id: PostId, caller: AuthPayload) -> None:
        """Delete a post together with its engagement rows.

        Allowed for the creator and for any ADMIN.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the caller is neither creator nor admin
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), user_id=str(caller.id)
        ):
            post = await self.get_existing(post_id)

            if not can_mutate(post, caller, admin_override=True):
                logfire.warn(
                    "Unauthorized post delete attempt",
                    post_id=str(post_id),
                    user_id=str(caller.id),
                    role=caller.role.value,
                )
                raise NotAuthorizedError(
                    "delete", "post", str(post_id), str(caller.id)
                )

            removed = await self.engagement_repository.delete_by_post(post_id)
            await self.post_repository.delete(post_id)
            logfire.info(
                "Post deleted",
                post_id=str(post_id),
                engagements_removed=removed,
                by_admin=post.creator_id != caller.id,
            )

    @staticmethod
    def _summarize(user: User) -> CreatorSummary:
        return CreatorSummary(id=user.id, name=user.name.root)

    @staticmethod
    def _creator_for(
        post: Post, creators: dict[UserId, CreatorSummary]
    ) -> CreatorSummary:
        creator = creators.get(post.creator_id)
        if creator is None:
            raise DataIntegrityError(
                f"Creator {post.creator_id} of post {post.id} does not exist"
            )
        return creator
