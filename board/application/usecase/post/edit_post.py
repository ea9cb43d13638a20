"""Edit post use case."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase, require_string
from board.domain.service import JWTService, PostService
from board.domain.value import PostId


class EditPostRequest(BaseModel):
    """Edit post request."""

    post_id: str
    token: Optional[str] = None
    content: Any = None


class EditPostResponse(BaseModel):
    """Edit post response."""

    id: str
    content: str
    likes: int
    dislikes: int
    created_at: datetime
    updated_at: datetime


class EditPostUseCase(BaseUseCase):
    """Use case for replacing the content of one's own post."""

    def __init__(self, jwt_service: JWTService, post_service: PostService) -> None:
        """Initialize edit post use case.

        Args:
            jwt_service: Identity verifier
            post_service: Post domain service
        """
        self.jwt_service = jwt_service
        self.post_service = post_service

    async def execute(self, request: EditPostRequest) -> EditPostResponse:
        """Execute edit post flow.

        Raises:
            AuthenticationError: If the token is missing or invalid
            ValidationError: If content is not a non-empty string
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the caller did not create the post
        """
        caller = self.jwt_service.authenticate(request.token)
        content = require_string(request.content, "content")

        post = await self.post_service.update_content(
            PostId(request.post_id), content, caller
        )

        return EditPostResponse(
            id=str(post.id),
            content=post.content,
            likes=post.likes,
            dislikes=post.dislikes,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
