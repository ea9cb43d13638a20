"""Test configuration and helpers."""

import os
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from board.config import AuthSettings
from board.domain.model import Post, User
from board.domain.value import AuthPayload, PostId, Reaction, UserId, UserRole
from board.domain.value.types import DisplayName, Email
from board.persistence.repository.inmemory import InMemoryDatabase
from board.util.jwt import create_token

# Settings() reads these when a test container first resolves them
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

# Keep spans local while testing
logfire.configure(send_to_logfire=False, console=False)

# Cheap hashes keep the suite fast
TEST_AUTH_SETTINGS = AuthSettings(jwt_secret="test-secret", bcrypt_rounds=4)


def make_user(
    name: str = "Alice",
    email: str | None = None,
    role: UserRole = UserRole.NORMAL,
    password_hash: str = "not-a-real-hash",
) -> User:
    """Build a user with a unique ID and email."""
    user_id = str(uuid4())
    return User(
        id=UserId(user_id),
        name=DisplayName(name),
        email=Email(email or f"{user_id[:8]}@example.com"),
        password_hash=password_hash,
        role=role,
    )


def make_post(
    creator: User | UserId,
    content: str = "Hello board",
    likes: int = 0,
    dislikes: int = 0,
    age: timedelta = timedelta(minutes=5),
) -> Post:
    """Build a post created ``age`` ago."""
    created = datetime.now(timezone.utc) - age
    creator_id = creator.id if isinstance(creator, User) else creator
    return Post(
        id=PostId(str(uuid4())),
        content=content,
        likes=likes,
        dislikes=dislikes,
        creator_id=creator_id,
        created_at=created,
        updated_at=created,
    )


def payload_for(user: User) -> AuthPayload:
    """Caller identity for a user, as a verified token would yield."""
    return AuthPayload(id=user.id, name=user.name.root, role=user.role)


def token_for(user: User, settings: AuthSettings) -> str:
    """Signed token for a user."""
    return create_token(str(user.id), user.name.root, user.role, settings)


# Credentials every authenticated use case must turn away
REJECTED_TOKENS = [
    None,
    "garbage",
    token_for(make_user("Mallory"), AuthSettings(jwt_secret="someone-else")),
]


def reaction_counts(database: InMemoryDatabase, post_id: PostId) -> tuple[int, int]:
    """Likes and dislikes recorded as engagement rows on a post."""
    reactions = [
        e.reaction for e in database.engagements.values() if e.post_id == post_id
    ]
    return reactions.count(Reaction.LIKE), reactions.count(Reaction.DISLIKE)
