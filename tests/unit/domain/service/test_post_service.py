"""Unit tests for PostService."""

from datetime import timedelta

import pytest

from board.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from board.domain.model import Engagement
from board.domain.repository import (
    EngagementRepository,
    PostRepository,
    UserRepository,
)
from board.domain.service import PostService
from board.domain.value import PostId, Reaction, UserId, UserRole
from board.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import make_post, make_user, payload_for, reaction_counts
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListWithCreators:
    """Tests for list_with_creators method."""

    @pytest.mark.asyncio
    async def test_lists_newest_first_with_creator(self, unit_env):
        """Posts come back newest first, each joined with its creator."""
        # Arrange
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        alice = await user_repo.save(make_user("Alice"))
        bob = await user_repo.save(make_user("Bob"))
        older = await post_repo.save(make_post(alice, "older", age=timedelta(hours=2)))
        newer = await post_repo.save(make_post(bob, "newer", age=timedelta(minutes=1)))

        # Act
        rows = await post_service.list_with_creators()

        # Assert
        assert [post.id for post, _ in rows] == [newer.id, older.id]
        assert rows[0][1].name == "Bob"
        assert rows[1][1].id == alice.id

    @pytest.mark.asyncio
    async def test_filters_case_insensitively(self, unit_env):
        """The query matches any part of the content regardless of case."""
        # Arrange
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        alice = await user_repo.save(make_user())
        match = await post_repo.save(make_post(alice, "Hello World"))
        await post_repo.save(make_post(alice, "Goodbye"))

        # Act
        rows = await post_service.list_with_creators("WORLD")

        # Assert
        assert [post.id for post, _ in rows] == [match.id]

    @pytest.mark.asyncio
    async def test_no_match_returns_empty_list(self, unit_env):
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        alice = await user_repo.save(make_user())
        await post_repo.save(make_post(alice, "Hello"))

        assert await post_service.list_with_creators("zzz") == []

    @pytest.mark.asyncio
    async def test_skips_post_with_missing_creator(self, unit_env):
        """A post whose creator is gone is left out instead of failing the list."""
        # Arrange
        post_service = await unit_env.get(PostService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        alice = await user_repo.save(make_user())
        kept = await post_repo.save(make_post(alice, "kept"))
        await post_repo.save(make_post(UserId("ghost"), "orphan"))

        # Act
        rows = await post_service.list_with_creators()

        # Assert
        assert [post.id for post, _ in rows] == [kept.id]


class TestCreate:
    """Tests for create method."""

    @pytest.mark.asyncio
    async def test_create_saves_post_with_zero_counters(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        creator_id = UserId("creator-1")

        # Act
        post = await post_service.create("First post", creator_id)

        # Assert
        assert post.likes == 0
        assert post.dislikes == 0
        assert post.creator_id == creator_id
        assert post.created_at == post.updated_at

        saved = await post_repo.find_by_id(post.id)
        assert saved == post

    @pytest.mark.asyncio
    async def test_create_assigns_distinct_ids(self, unit_env):
        post_service = await unit_env.get(PostService)

        first = await post_service.create("a", UserId("u"))
        second = await post_service.create("a", UserId("u"))

        assert first.id != second.id


class TestUpdateContent:
    """Tests for update_content method."""

    @pytest.mark.asyncio
    async def test_creator_can_edit(self, unit_env):
        """Editing replaces content, keeps counters and moves updated_at."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)

        creator = make_user()
        post = await post_repo.save(make_post(creator, "old", likes=2, dislikes=1))

        # Act
        result = await post_service.update_content(post.id, "new", payload_for(creator))

        # Assert
        assert result.content == "new"
        assert (result.likes, result.dislikes) == (2, 1)
        assert result.created_at == post.created_at
        assert result.updated_at > post.updated_at

        saved = await post_repo.find_by_id(post.id)
        assert saved.content == "new"

    @pytest.mark.asyncio
    async def test_admin_cannot_edit_others_post(self, unit_env):
        """The ADMIN role does not override edit ownership."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)

        post = await post_repo.save(make_post(make_user(), "original"))
        admin = make_user("Root", role=UserRole.ADMIN)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await post_service.update_content(post.id, "hijack", payload_for(admin))

        saved = await post_repo.find_by_id(post.id)
        assert saved.content == "original"

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)

        post = await post_repo.save(make_post(make_user()))

        with pytest.raises(NotAuthorizedError):
            await post_service.update_content(
                post.id, "x", payload_for(make_user("Bob"))
            )

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.update_content(
                PostId("missing"), "x", payload_for(make_user())
            )

    @pytest.mark.asyncio
    async def test_empty_content_rejected(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)

        creator = make_user()
        post = await post_repo.save(make_post(creator))

        with pytest.raises(ValidationError):
            await post_service.update_content(post.id, "", payload_for(creator))


class TestDeletePost:
    """Tests for delete_post method."""

    @pytest.mark.asyncio
    async def test_creator_can_delete(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)

        creator = make_user()
        post = await post_repo.save(make_post(creator))

        await post_service.delete_post(post.id, payload_for(creator))

        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_admin_can_delete_others_post(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)

        post = await post_repo.save(make_post(make_user()))
        admin = make_user("Root", role=UserRole.ADMIN)

        await post_service.delete_post(post.id, payload_for(admin))

        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)

        post = await post_repo.save(make_post(make_user()))

        with pytest.raises(NotAuthorizedError):
            await post_service.delete_post(post.id, payload_for(make_user("Bob")))

        assert await post_repo.find_by_id(post.id) is not None

    @pytest.mark.asyncio
    async def test_delete_removes_engagements(self, unit_env):
        """Deleting a post removes every reaction recorded against it."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        engagement_repo = await unit_env.get(EngagementRepository)
        database = await unit_env.get(InMemoryDatabase)

        creator = make_user()
        fan = make_user("Bob")
        post = await post_repo.save(make_post(creator, likes=1))
        await engagement_repo.save(
            Engagement(user_id=fan.id, post_id=post.id, reaction=Reaction.LIKE)
        )

        # Act
        await post_service.delete_post(post.id, payload_for(creator))

        # Assert
        assert await engagement_repo.find(fan.id, post.id) is None
        assert reaction_counts(database, post.id) == (0, 0)

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.delete_post(PostId("missing"), payload_for(make_user()))
