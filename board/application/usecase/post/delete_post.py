"""Delete post use case."""

from typing import Optional

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.service import JWTService, PostService
from board.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    token: Optional[str] = None


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: str
    deleted: bool = True


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post (creator or admin)."""

    def __init__(self, jwt_service: JWTService, post_service: PostService) -> None:
        self.jwt_service = jwt_service
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            AuthenticationError: If the token is missing or invalid
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the caller is neither creator nor admin
        """
        caller = self.jwt_service.authenticate(request.token)
        await self.post_service.delete_post(PostId(request.post_id), caller)
        return DeletePostResponse(post_id=request.post_id)
