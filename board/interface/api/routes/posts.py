"""Post routes.

The caller's token is read from the ``Authorization`` header, either raw or
as ``Bearer <token>``. Bodies are read leniently (see ``board.interface.api.body``)
so a malformed body from an unauthenticated caller is still answered with 401.
Domain errors raised by the use cases are turned into responses by the
handlers in ``board.interface.error``.
"""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Request, status

from board.application.usecase.engagement import (
    ReactToPostRequest,
    ReactToPostResponse,
    ReactToPostUseCase,
)
from board.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    EditPostRequest,
    EditPostResponse,
    EditPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    PostListItem,
)
from board.interface.api.body import read_json_object

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


@router.get("", response_model=list[PostListItem])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    q: Optional[str] = None,
    authorization: Optional[str] = Header(default=None),
) -> list[PostListItem]:
    """List posts with their creators, optionally filtered by content."""
    result = await list_posts_use_case.execute(
        ListPostsRequest(token=authorization, q=q)
    )
    return result.posts


@router.post(
    "", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED
)
async def create_post(
    http_request: Request,
    create_post_use_case: FromDishka[CreatePostUseCase],
    authorization: Optional[str] = Header(default=None),
) -> CreatePostResponse:
    """Create a post owned by the caller. Body: ``{"content": "..."}``."""
    body = await read_json_object(http_request)
    return await create_post_use_case.execute(
        CreatePostRequest(token=authorization, content=body.get("content"))
    )


@router.put("/{post_id}", response_model=EditPostResponse)
async def edit_post(
    post_id: str,
    http_request: Request,
    edit_post_use_case: FromDishka[EditPostUseCase],
    authorization: Optional[str] = Header(default=None),
) -> EditPostResponse:
    """Replace the content of one of the caller's posts."""
    body = await read_json_object(http_request)
    return await edit_post_use_case.execute(
        EditPostRequest(
            post_id=post_id, token=authorization, content=body.get("content")
        )
    )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    authorization: Optional[str] = Header(default=None),
) -> DeletePostResponse:
    """Delete a post (creator or admin)."""
    return await delete_post_use_case.execute(
        DeletePostRequest(post_id=post_id, token=authorization)
    )


@router.put("/{post_id}/like", response_model=ReactToPostResponse)
async def react_to_post(
    post_id: str,
    http_request: Request,
    react_use_case: FromDishka[ReactToPostUseCase],
    authorization: Optional[str] = Header(default=None),
) -> ReactToPostResponse:
    """Like (``{"like": true}``) or dislike (``{"like": false}``) a post.

    Sending the reaction already on record withdraws it.
    """
    body = await read_json_object(http_request)
    return await react_use_case.execute(
        ReactToPostRequest(post_id=post_id, token=authorization, like=body.get("like"))
    )
