"""Unit tests for the post authorization predicates."""

from board.domain.service import can_mutate, can_react
from board.domain.value import UserRole
from tests.conftest import make_post, make_user, payload_for


class TestCanMutate:
    def test_creator_may_mutate_without_override(self):
        creator = make_user()
        post = make_post(creator)

        assert can_mutate(post, payload_for(creator), admin_override=False)
        assert can_mutate(post, payload_for(creator), admin_override=True)

    def test_other_normal_user_may_not_mutate(self):
        post = make_post(make_user())
        other = make_user("Bob")

        assert not can_mutate(post, payload_for(other), admin_override=False)
        assert not can_mutate(post, payload_for(other), admin_override=True)

    def test_admin_needs_override(self):
        post = make_post(make_user())
        admin = make_user("Root", role=UserRole.ADMIN)

        assert can_mutate(post, payload_for(admin), admin_override=True)
        assert not can_mutate(post, payload_for(admin), admin_override=False)


class TestCanReact:
    def test_creator_may_not_react(self):
        creator = make_user()
        assert not can_react(make_post(creator), payload_for(creator))

    def test_admin_creator_may_not_react_either(self):
        admin = make_user(role=UserRole.ADMIN)
        assert not can_react(make_post(admin), payload_for(admin))

    def test_other_user_may_react(self):
        post = make_post(make_user())
        assert can_react(post, payload_for(make_user("Bob")))
