"""Post aggregate root.

A post is a short text owned by its creator. Its like and dislike counters
mirror the engagement rows recorded against it and are only changed through
the engagement flow.
"""

from datetime import datetime

from pydantic import Field, model_validator

from board.domain.error import ValidationError
from board.domain.model.common import DomainModel, utc_now
from board.domain.value import PostId, UserId


class Post(DomainModel):
    """Post aggregate root.

    Mutators return a new ``Post``; the original instance is left untouched.
    """

    id: PostId
    content: str = Field(min_length=1)
    likes: int = Field(default=0, ge=0)
    dislikes: int = Field(default=0, ge=0)
    creator_id: UserId
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def validate_timestamps(self) -> "Post":
        """Validate that the post was not updated before it was created."""
        if self.updated_at < self.created_at:
            raise ValueError("updated_at cannot be earlier than created_at")
        return self

    def set_content(self, content: str) -> "Post":
        """Replace the post's text.

        Raises:
            ValidationError: If content is not a non-empty string
        """
        if not isinstance(content, str) or len(content) == 0:
            raise ValidationError("Post content cannot be empty")
        return self.model_copy(update={"content": content})

    def set_updated_at(self, timestamp: datetime) -> "Post":
        """Move updated_at forward; earlier timestamps are ignored."""
        return self.model_copy(update={"updated_at": max(self.updated_at, timestamp)})

    def add_like(self) -> "Post":
        return self.model_copy(update={"likes": self.likes + 1})

    def remove_like(self) -> "Post":
        # Clamped at zero
        return self.model_copy(update={"likes": max(0, self.likes - 1)})

    def add_dislike(self) -> "Post":
        return self.model_copy(update={"dislikes": self.dislikes + 1})

    def remove_dislike(self) -> "Post":
        return self.model_copy(update={"dislikes": max(0, self.dislikes - 1)})

    def apply_counter_delta(self, like_delta: int, dislike_delta: int) -> "Post":
        """Apply a unit delta (-1, 0 or +1) to each counter.

        Args:
            like_delta: Change to the like counter
            dislike_delta: Change to the dislike counter

        Returns:
            Post with both counters adjusted
        """
        post = self
        if like_delta > 0:
            post = post.add_like()
        elif like_delta < 0:
            post = post.remove_like()

        if dislike_delta > 0:
            post = post.add_dislike()
        elif dislike_delta < 0:
            post = post.remove_dislike()

        return post
