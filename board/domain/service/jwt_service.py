"""JWT token domain service."""

from typing import Optional

import logfire

from board.config import AuthSettings
from board.domain.error import AuthenticationError
from board.domain.model import User
from board.domain.value import AuthPayload, UserId
from board.util.jwt import JWTError, create_token, verify_token

from .base import Service

BEARER_PREFIX = "Bearer "


class JWTService(Service):
    """Domain service for JWT token operations.

    Acts as the identity verifier: every use case hands it the raw
    credential before touching the store.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user: User | AuthPayload) -> str:
        """Create JWT token for a user.

        Args:
            user: User entity or an already verified identity

        Returns:
            JWT token string
        """
        name = user.name.root if isinstance(user, User) else user.name
        with logfire.span("jwt_service.create_token", user_id=str(user.id)):
            token = create_token(str(user.id), name, user.role, self.auth_settings)
            logfire.info("JWT token created", user_id=str(user.id))
            return token

    def authenticate(self, token: Optional[str]) -> AuthPayload:
        """Verify a credential and return the caller's identity.

        Accepts the raw token or the ``Bearer <token>`` header form.

        Args:
            token: Credential supplied with the request

        Returns:
            Verified caller identity

        Raises:
            AuthenticationError: If the token is missing, invalid or expired
        """
        with logfire.span("jwt_service.authenticate"):
            if not token or not isinstance(token, str):
                logfire.warn("Missing credential")
                raise AuthenticationError("Missing authentication token")

            if token.startswith(BEARER_PREFIX):
                token = token[len(BEARER_PREFIX) :]

            try:
                payload = verify_token(token.strip(), self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise AuthenticationError(str(e))

            logfire.info("JWT token verified", user_id=payload.user_id)
            return AuthPayload(
                id=UserId(payload.user_id), name=payload.name, role=payload.role
            )
