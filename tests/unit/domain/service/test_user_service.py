"""Unit tests for UserService."""

import pytest

from board.domain.error import AuthenticationError, ConflictError, NotFoundError
from board.domain.repository import UserRepository
from board.domain.service import UserService
from board.domain.value import UserRole
from board.domain.value.types import DisplayName, Email
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegister:
    """Tests for register method."""

    @pytest.mark.asyncio
    async def test_register_creates_normal_user_with_hashed_password(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)

        # Act
        user = await user_service.register(
            DisplayName("Alice"), Email("alice@example.com"), "secret"
        )

        # Assert
        assert user.role == UserRole.NORMAL
        assert user.password_hash != "secret"
        assert await user_repo.find_by_email(Email("alice@example.com")) == user

    @pytest.mark.asyncio
    async def test_register_rejects_duplicate_email(self, unit_env):
        """Emails are compared after normalisation."""
        user_service = await unit_env.get(UserService)

        await user_service.register(
            DisplayName("Alice"), Email("alice@example.com"), "secret"
        )

        with pytest.raises(ConflictError):
            await user_service.register(
                DisplayName("Other"), Email("ALICE@example.com"), "secret"
            )


class TestVerifyCredentials:
    """Tests for verify_credentials method."""

    @pytest.mark.asyncio
    async def test_correct_password(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.register(
            DisplayName("Alice"), Email("alice@example.com"), "secret"
        )

        verified = await user_service.verify_credentials(
            Email("alice@example.com"), "secret"
        )

        assert verified.id == user.id

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env):
        user_service = await unit_env.get(UserService)
        await user_service.register(
            DisplayName("Alice"), Email("alice@example.com"), "secret"
        )

        with pytest.raises(AuthenticationError):
            await user_service.verify_credentials(Email("alice@example.com"), "nope")

    @pytest.mark.asyncio
    async def test_unknown_email(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.verify_credentials(Email("nobody@example.com"), "x")
