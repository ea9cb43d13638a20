"""Ownership and role rules for post mutations."""

from board.domain.model.post import Post
from board.domain.value import AuthPayload


def can_mutate(post: Post, caller: AuthPayload, admin_override: bool) -> bool:
    """Check whether the caller may change or remove a post.

    Creators may always act on their own posts. Admins may act on any post
    only where the operation allows an admin override (delete does, edit
    does not).

    Args:
        post: Target post
        caller: Verified caller identity
        admin_override: Whether the ADMIN role bypasses ownership

    Returns:
        True if the mutation is allowed
    """
    if post.creator_id == caller.id:
        return True
    return admin_override and caller.is_admin


def can_react(post: Post, caller: AuthPayload) -> bool:
    """Creators may not like or dislike their own posts."""
    return post.creator_id != caller.id
