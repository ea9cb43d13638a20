"""Engagement domain service."""

import logfire

from board.domain.error import NotAuthorizedError, NotFoundError
from board.domain.model import Engagement, Post
from board.domain.repository import EngagementRepository, PostRepository
from board.domain.value import (
    AuthPayload,
    EngagementOperation,
    EngagementState,
    PostId,
    Reaction,
)
from board.domain.value.common import ValueObject

from .base import Service
from .engagement_resolver import EngagementResolver
from .policy import can_react


class ReactionOutcome(ValueObject):
    """Post and relationship state after a reaction was applied."""

    post: Post
    state: EngagementState


class EngagementService(Service):
    """Domain service keeping engagement rows and post counters in step."""

    def __init__(
        self,
        post_repository: PostRepository,
        engagement_repository: EngagementRepository,
        resolver: EngagementResolver,
    ) -> None:
        """Initialize engagement service.

        Args:
            post_repository: Post repository
            engagement_repository: Engagement repository
            resolver: Engagement state machine
        """
        self.post_repository = post_repository
        self.engagement_repository = engagement_repository
        self.resolver = resolver

    async def react(
        self, post_id: PostId, caller: AuthPayload, reaction: Reaction
    ) -> ReactionOutcome:
        """Apply a like or dislike from the caller to a post.

        The post row is locked for the rest of the unit of work so concurrent
        reactions on the same post are serialised.

        Args:
            post_id: Target post
            caller: Verified caller identity
            reaction: Desired reaction

        Returns:
            Updated post and the caller's new engagement state

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the caller created the post
        """
        with logfire.span(
            "engagement_service.react",
            post_id=str(post_id),
            user_id=str(caller.id),
            reaction=reaction.value,
        ):
            post = await self.post_repository.find_by_id_for_update(post_id)
            if not post:
                logfire.warn("Reaction on non-existent post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            if not can_react(post, caller):
                logfire.warn(
                    "Self-reaction attempt", post_id=str(post_id), user_id=str(caller.id)
                )
                raise NotAuthorizedError(
                    "react to", "post", str(post_id), str(caller.id)
                )

            existing = await self.engagement_repository.find(caller.id, post_id)
            current = Engagement.state_of(existing)
            transition = self.resolver.resolve(current, reaction)

            await self._apply_row_operation(
                transition.operation,
                Engagement(user_id=caller.id, post_id=post_id, reaction=reaction),
            )

            updated = post.apply_counter_delta(
                transition.like_delta, transition.dislike_delta
            )
            saved = await self.post_repository.update(updated)

            logfire.info(
                "Reaction applied",
                post_id=str(post_id),
                user_id=str(caller.id),
                previous_state=current.value,
                state=transition.next_state.value,
                operation=transition.operation.value,
                likes=saved.likes,
                dislikes=saved.dislikes,
            )
            return ReactionOutcome(post=saved, state=transition.next_state)

    async def _apply_row_operation(
        self, operation: EngagementOperation, engagement: Engagement
    ) -> None:
        if operation == EngagementOperation.INSERT:
            await self.engagement_repository.save(engagement)
        elif operation == EngagementOperation.UPDATE:
            await self.engagement_repository.update(engagement)
        else:
            await self.engagement_repository.delete(
                engagement.user_id, engagement.post_id
            )
