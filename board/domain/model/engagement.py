"""Engagement entity.

An engagement records one user's like or dislike on one post. There is at
most one row per (user, post) pair; no row means the user has not reacted.
"""

from board.domain.model.common import DomainModel
from board.domain.value import EngagementState, PostId, Reaction, UserId


class Engagement(DomainModel):
    """Like/dislike record keyed by (user_id, post_id)."""

    user_id: UserId
    post_id: PostId
    reaction: Reaction

    @property
    def state(self) -> EngagementState:
        if self.reaction == Reaction.LIKE:
            return EngagementState.LIKED
        return EngagementState.DISLIKED

    @staticmethod
    def state_of(engagement: "Engagement | None") -> EngagementState:
        """Relationship state for an optional engagement row."""
        if engagement is None:
            return EngagementState.NONE
        return engagement.state
