"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .edit_post import EditPostRequest, EditPostResponse, EditPostUseCase
from .list_posts import (
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostListItem,
)

__all__ = [
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "EditPostRequest",
    "EditPostResponse",
    "EditPostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostListItem",
]
