"""User domain service."""

import logfire

from board.domain.error import AuthenticationError, ConflictError, NotFoundError
from board.domain.model import User
from board.domain.model.common import utc_now
from board.domain.repository import UserRepository
from board.domain.value import DisplayName, Email, UserId, UserRole

from .base import Service
from .hash_service import HashService
from .id_generator import IdGenerator


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        hash_service: HashService,
        id_generator: IdGenerator,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            hash_service: Password hasher
            id_generator: Generator for new user IDs
        """
        self.user_repository = user_repository
        self.hash_service = hash_service
        self.id_generator = id_generator

    async def register(
        self, name: DisplayName, email: Email, password: str
    ) -> User:
        """Register a new NORMAL user.

        Raises:
            ConflictError: If the email is already registered
        """
        with logfire.span("user_service.register", email=email.root):
            if await self.user_repository.find_by_email(email):
                logfire.warn("Signup with registered email", email=email.root)
                raise ConflictError("Email is already registered")

            user = User(
                id=UserId(self.id_generator.generate()),
                name=name,
                email=email,
                password_hash=self.hash_service.hash(password),
                role=UserRole.NORMAL,
                created_at=utc_now(),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def verify_credentials(self, email: Email, password: str) -> User:
        """Look up a user by email and check their password.

        Raises:
            NotFoundError: If no user has this email
            AuthenticationError: If the password does not match
        """
        with logfire.span("user_service.verify_credentials", email=email.root):
            user = await self.user_repository.find_by_email(email)
            if not user:
                logfire.warn("Login for unknown email", email=email.root)
                raise NotFoundError("User", email.root)

            if not self.hash_service.compare(password, user.password_hash):
                logfire.warn("Login with wrong password", user_id=str(user.id))
                raise AuthenticationError("Invalid email or password")

            logfire.info("User credentials verified", user_id=str(user.id))
            return user
