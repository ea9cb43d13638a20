"""Signup use case."""

from typing import Any

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from board.application.usecase.base import BaseUseCase, require_string
from board.domain.error import ValidationError
from board.domain.service import JWTService, UserService
from board.domain.value import DisplayName, Email

# bcrypt only reads the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class SignupRequest(BaseModel):
    """Signup request."""

    name: Any = None
    email: Any = None
    password: Any = None


class SignupResponse(BaseModel):
    """Signup response."""

    message: str
    token: str


class SignupUseCase(BaseUseCase):
    """Use case for registering a new user and signing them in."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize signup use case.

        Args:
            user_service: User domain service
            jwt_service: Token issuer
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignupRequest) -> SignupResponse:
        """Execute signup flow.

        Raises:
            ValidationError: If a field is missing or malformed
            ConflictError: If the email is already registered
        """
        raw_name = require_string(request.name, "name")
        raw_email = require_string(request.email, "email")
        password = require_string(request.password, "password")

        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"'password' cannot be longer than {MAX_PASSWORD_BYTES} bytes"
            )

        try:
            name = DisplayName(raw_name)
            email = Email(raw_email)
        except PydanticValidationError as e:
            logfire.warn("Signup input rejected", error=str(e))
            raise ValidationError(e.errors()[0]["msg"])

        user = await self.user_service.register(name, email, password)
        token = self.jwt_service.create_token(user)

        return SignupResponse(message="Signup successful", token=token)
