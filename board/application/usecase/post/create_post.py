"""Create post use case."""

from typing import Any, Optional

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase, require_string
from board.domain.service import JWTService, PostService


class CreatePostRequest(BaseModel):
    """Create post request."""

    token: Optional[str] = None
    content: Any = None


class CreatePostResponse(BaseModel):
    """Create post response.

    Only an acknowledgment is returned, not the post itself.
    """

    message: str


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a new post."""

    def __init__(self, jwt_service: JWTService, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            jwt_service: Identity verifier
            post_service: Post domain service
        """
        self.jwt_service = jwt_service
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Verify the caller's token
        2. Validate content is a non-empty string
        3. Create the post owned by the caller with zeroed counters

        Raises:
            AuthenticationError: If the token is missing or invalid
            ValidationError: If content is missing, not a string or empty
        """
        caller = self.jwt_service.authenticate(request.token)
        content = require_string(request.content, "content")

        await self.post_service.create(content, caller.id)

        return CreatePostResponse(message="Post created")
