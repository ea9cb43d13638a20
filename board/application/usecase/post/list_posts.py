"""List posts use case."""

from datetime import datetime
from typing import Any, Optional

import logfire
from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase, require_string
from board.domain.model import Post
from board.domain.service import JWTService, PostService
from board.domain.value import CreatorSummary


class PostListItem(BaseModel):
    """Public view of a post."""

    id: str
    content: str
    likes: int
    dislikes: int
    created_at: datetime
    updated_at: datetime
    creator: CreatorSummary

    @classmethod
    def from_post(cls, post: Post, creator: CreatorSummary) -> "PostListItem":
        return cls(
            id=str(post.id),
            content=post.content,
            likes=post.likes,
            dislikes=post.dislikes,
            created_at=post.created_at,
            updated_at=post.updated_at,
            creator=creator,
        )


class ListPostsRequest(BaseModel):
    """List posts request."""

    token: Optional[str] = None
    q: Any = None  # Optional content filter


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostListItem]


class ListPostsUseCase(BaseUseCase):
    """Use case for listing posts with their creators."""

    def __init__(self, jwt_service: JWTService, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            jwt_service: Identity verifier
            post_service: Post domain service
        """
        self.jwt_service = jwt_service
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Raises:
            AuthenticationError: If the token is missing or invalid
            ValidationError: If q is present but not a string
        """
        caller = self.jwt_service.authenticate(request.token)

        query = None
        if request.q is not None:
            query = require_string(request.q, "q", allow_empty=True) or None

        with logfire.span("list_posts.execute", user_id=str(caller.id), q=query):
            rows = await self.post_service.list_with_creators(query)
            return ListPostsResponse(
                posts=[PostListItem.from_post(post, creator) for post, creator in rows]
            )
