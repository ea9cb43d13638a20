"""Unit tests for ListPostsUseCase."""

from datetime import timedelta

import pytest

from board.application.usecase.post import ListPostsRequest, ListPostsUseCase
from board.config import AuthSettings
from board.domain.error import AuthenticationError, ValidationError
from board.domain.repository import PostRepository, UserRepository
from tests.conftest import make_post, make_user, token_for
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListPosts:
    """Tests for listing posts."""

    @pytest.mark.asyncio
    async def test_returns_posts_with_creator(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListPostsUseCase)
        auth = await unit_env.get(AuthSettings)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        alice = await user_repo.save(make_user("Alice"))
        first = await post_repo.save(make_post(alice, "first", age=timedelta(hours=1)))
        second = await post_repo.save(make_post(alice, "second", likes=3))

        # Act
        response = await use_case.execute(
            ListPostsRequest(token=token_for(alice, auth))
        )

        # Assert
        assert [item.id for item in response.posts] == [str(second.id), str(first.id)]
        item = response.posts[0]
        assert item.content == "second"
        assert item.likes == 3
        assert item.creator.id == alice.id
        assert item.creator.name == "Alice"

    @pytest.mark.asyncio
    async def test_filter_by_q(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListPostsUseCase)
        auth = await unit_env.get(AuthSettings)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        alice = await user_repo.save(make_user())
        await post_repo.save(make_post(alice, "Hello World"))
        await post_repo.save(make_post(alice, "Goodbye"))

        # Act
        response = await use_case.execute(
            ListPostsRequest(token=token_for(alice, auth), q="world")
        )

        # Assert
        assert [item.content for item in response.posts] == ["Hello World"]

    @pytest.mark.asyncio
    async def test_empty_q_means_no_filter(self, unit_env):
        use_case = await unit_env.get(ListPostsUseCase)
        auth = await unit_env.get(AuthSettings)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        alice = await user_repo.save(make_user())
        await post_repo.save(make_post(alice, "one"))
        await post_repo.save(make_post(alice, "two"))

        response = await use_case.execute(
            ListPostsRequest(token=token_for(alice, auth), q="")
        )

        assert len(response.posts) == 2

    @pytest.mark.asyncio
    async def test_empty_board(self, unit_env):
        use_case = await unit_env.get(ListPostsUseCase)
        auth = await unit_env.get(AuthSettings)

        response = await use_case.execute(
            ListPostsRequest(token=token_for(make_user(), auth))
        )

        assert response.posts == []

    @pytest.mark.asyncio
    async def test_missing_token(self, unit_env):
        use_case = await unit_env.get(ListPostsUseCase)

        with pytest.raises(AuthenticationError):
            await use_case.execute(ListPostsRequest())

    @pytest.mark.asyncio
    async def test_token_checked_before_q(self, unit_env):
        """A bad token wins over a malformed filter."""
        use_case = await unit_env.get(ListPostsUseCase)

        with pytest.raises(AuthenticationError):
            await use_case.execute(ListPostsRequest(token="garbage", q=42))

    @pytest.mark.asyncio
    async def test_non_string_q(self, unit_env):
        use_case = await unit_env.get(ListPostsUseCase)
        auth = await unit_env.get(AuthSettings)

        with pytest.raises(ValidationError):
            await use_case.execute(
                ListPostsRequest(token=token_for(make_user(), auth), q=42)
            )
