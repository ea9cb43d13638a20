"""Login use case."""

from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from board.application.usecase.base import BaseUseCase, require_string
from board.domain.error import NotFoundError
from board.domain.service import JWTService, UserService
from board.domain.value import Email


class LoginRequest(BaseModel):
    """Login request with email and password."""

    email: Any = None
    password: Any = None


class LoginResponse(BaseModel):
    """Login response."""

    message: str
    token: str


class LoginUseCase(BaseUseCase):
    """Use case for password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: Token issuer
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            ValidationError: If email or password is not a string
            NotFoundError: If no user has this email
            AuthenticationError: If the password is wrong
        """
        raw_email = require_string(request.email, "email")
        password = require_string(request.password, "password", allow_empty=True)

        try:
            email = Email(raw_email)
        except PydanticValidationError:
            # A malformed address cannot belong to any account
            raise NotFoundError("User", raw_email)

        user = await self.user_service.verify_credentials(email, password)
        token = self.jwt_service.create_token(user)

        return LoginResponse(message="Login successful", token=token)
