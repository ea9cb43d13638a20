"""React to post use case."""

from typing import Any, Optional

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.error import ValidationError
from board.domain.service import EngagementService, JWTService
from board.domain.value import EngagementState, PostId, Reaction


class ReactToPostRequest(BaseModel):
    """Like/dislike request.

    ``like`` is True for a like and False for a dislike; a ``Reaction`` is
    accepted as well.
    """

    post_id: str
    token: Optional[str] = None
    like: Any = None


class ReactToPostResponse(BaseModel):
    """React to post response."""

    post_id: str
    likes: int
    dislikes: int
    state: EngagementState


class ReactToPostUseCase(BaseUseCase):
    """Use case for liking, disliking or withdrawing a reaction."""

    def __init__(
        self, jwt_service: JWTService, engagement_service: EngagementService
    ) -> None:
        """Initialize react to post use case.

        Args:
            jwt_service: Identity verifier
            engagement_service: Engagement domain service
        """
        self.jwt_service = jwt_service
        self.engagement_service = engagement_service

    async def execute(self, request: ReactToPostRequest) -> ReactToPostResponse:
        """Execute react flow.

        Raises:
            AuthenticationError: If the token is missing or invalid
            ValidationError: If like is not a boolean
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the caller created the post
        """
        caller = self.jwt_service.authenticate(request.token)
        reaction = self._parse_reaction(request.like)

        outcome = await self.engagement_service.react(
            PostId(request.post_id), caller, reaction
        )

        return ReactToPostResponse(
            post_id=str(outcome.post.id),
            likes=outcome.post.likes,
            dislikes=outcome.post.dislikes,
            state=outcome.state,
        )

    @staticmethod
    def _parse_reaction(value: Any) -> Reaction:
        if isinstance(value, Reaction):
            return value
        if isinstance(value, bool):
            return Reaction.from_flag(value)
        raise ValidationError("'like' must be a boolean")
