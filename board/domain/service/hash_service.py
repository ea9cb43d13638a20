"""Password hashing domain service."""

import logfire

from board.config import AuthSettings
from board.util.hashing import check_password, hash_password

from .base import Service


class HashService(Service):
    """Hashes and checks user passwords."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize hash service.

        Args:
            auth_settings: Authentication settings (bcrypt cost factor)
        """
        self.auth_settings = auth_settings

    def hash(self, plaintext: str) -> str:
        with logfire.span("hash_service.hash"):
            return hash_password(plaintext, rounds=self.auth_settings.bcrypt_rounds)

    def compare(self, plaintext: str, digest: str) -> bool:
        with logfire.span("hash_service.compare"):
            matches = check_password(plaintext, digest)
            if not matches:
                logfire.info("Password mismatch")
            return matches
