"""Shared in-memory storage for the in-memory repositories."""

from board.domain.model import Engagement, Post, User
from board.domain.value import PostId, UserId


class InMemoryDatabase:
    """Tables kept as dicts.

    One instance is shared by the repositories of a container so that
    writes made in one request are visible to the next.
    """

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.posts: dict[PostId, Post] = {}
        self.engagements: dict[tuple[UserId, PostId], Engagement] = {}
