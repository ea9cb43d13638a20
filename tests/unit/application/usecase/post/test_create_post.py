"""Unit tests for CreatePostUseCase."""

import pytest

from board.application.usecase.post import CreatePostRequest, CreatePostUseCase
from board.config import AuthSettings
from board.domain.error import AuthenticationError, ValidationError
from board.domain.repository import PostRepository
from tests.conftest import make_user, token_for
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for creating posts."""

    @pytest.mark.asyncio
    async def test_create_post_owned_by_caller(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        auth = await unit_env.get(AuthSettings)
        post_repo = await unit_env.get(PostRepository)
        alice = make_user()

        # Act
        response = await use_case.execute(
            CreatePostRequest(token=token_for(alice, auth), content="Hello")
        )

        # Assert
        assert response.message == "Post created"

        posts = await post_repo.find_all()
        assert len(posts) == 1
        assert posts[0].content == "Hello"
        assert posts[0].creator_id == alice.id
        assert (posts[0].likes, posts[0].dislikes) == (0, 0)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [None, "", 5, ["x"]])
    async def test_invalid_content(self, unit_env, content):
        use_case = await unit_env.get(CreatePostUseCase)
        auth = await unit_env.get(AuthSettings)
        post_repo = await unit_env.get(PostRepository)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreatePostRequest(token=token_for(make_user(), auth), content=content)
            )

        assert await post_repo.find_all() == []

    @pytest.mark.asyncio
    async def test_missing_token_checked_first(self, unit_env):
        """Authentication fails before the content is looked at."""
        use_case = await unit_env.get(CreatePostUseCase)

        with pytest.raises(AuthenticationError):
            await use_case.execute(CreatePostRequest(content=""))
