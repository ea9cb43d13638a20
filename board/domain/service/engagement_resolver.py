"""Engagement state machine.

Maps the current relationship between a user and a post plus the reaction
they submit to the next relationship, the counter changes on the post, and
the storage operation needed on the engagement row.

Repeating the reaction already on record removes it (toggle-off). Switching
reaction rewrites the existing row instead of deleting and re-inserting it.
"""

from board.domain.value import EngagementOperation, EngagementState, Reaction
from board.domain.value.common import ValueObject

from .base import Service


class EngagementTransition(ValueObject):
    """Outcome of applying a reaction to an engagement state."""

    next_state: EngagementState
    like_delta: int
    dislike_delta: int
    operation: EngagementOperation


TRANSITIONS: dict[tuple[EngagementState, Reaction], EngagementTransition] = {
    (EngagementState.NONE, Reaction.LIKE): EngagementTransition(
        next_state=EngagementState.LIKED,
        like_delta=1,
        dislike_delta=0,
        operation=EngagementOperation.INSERT,
    ),
    (EngagementState.NONE, Reaction.DISLIKE): EngagementTransition(
        next_state=EngagementState.DISLIKED,
        like_delta=0,
        dislike_delta=1,
        operation=EngagementOperation.INSERT,
    ),
    (EngagementState.LIKED, Reaction.LIKE): EngagementTransition(
        next_state=EngagementState.NONE,
        like_delta=-1,
        dislike_delta=0,
        operation=EngagementOperation.DELETE,
    ),
    (EngagementState.LIKED, Reaction.DISLIKE): EngagementTransition(
        next_state=EngagementState.DISLIKED,
        like_delta=-1,
        dislike_delta=1,
        operation=EngagementOperation.UPDATE,
    ),
    (EngagementState.DISLIKED, Reaction.LIKE): EngagementTransition(
        next_state=EngagementState.LIKED,
        like_delta=1,
        dislike_delta=-1,
        operation=EngagementOperation.UPDATE,
    ),
    (EngagementState.DISLIKED, Reaction.DISLIKE): EngagementTransition(
        next_state=EngagementState.NONE,
        like_delta=0,
        dislike_delta=-1,
        operation=EngagementOperation.DELETE,
    ),
}


def resolve_reaction(
    current: EngagementState, reaction: Reaction
) -> EngagementTransition:
    """Resolve a reaction against the current engagement state.

    Args:
        current: Relationship between the caller and the post before the request
        reaction: Reaction submitted by the caller

    Returns:
        Transition to apply
    """
    return TRANSITIONS[(current, reaction)]


class EngagementResolver(Service):
    """Stateless resolver injected into the engagement flow."""

    def resolve(
        self, current: EngagementState, reaction: Reaction
    ) -> EngagementTransition:
        return resolve_reaction(current, reaction)
