"""Post routes. Every route requires authentication."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field, field_validator

from connector.application.usecase.post import (
    AddCommentRequest,
    AddCommentUseCase,
    CommentView,
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    LikePostUseCase,
    LikeRequest,
    LikeView,
    ListPostsUseCase,
    MessageResponse,
    PostView,
    RemoveCommentRequest,
    RemoveCommentUseCase,
    UnlikePostUseCase,
)
from connector.domain.error import (
    AlreadyLikedError,
    NotAuthorizedError,
    NotFoundError,
    NotLikedError,
)
from connector.interface.api.security import CurrentUser
from connector.interface.api.validation import required_text
from connector.interface.error import http_error, server_error

router = APIRouter(prefix="/api/posts", tags=["posts"], route_class=DishkaRoute)

POST_NOT_FOUND = "Post not found"


class TextAPIRequest(BaseModel):
    """API request carrying post or comment text."""

    text: str | None = Field(default=None, validate_default=True)

    @field_validator("text", mode="before")
    @classmethod
    def check_text(cls, v):
        return required_text(v, "Text is required")


@router.post("", response_model=PostView)
async def create_post(
    user_id: CurrentUser,
    request: TextAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> PostView:
    """Publish a post under the caller's current name and avatar."""
    try:
        return await create_post_use_case.execute(
            CreatePostRequest(user_id=user_id, text=request.text)
        )
    except NotFoundError:
        logfire.warn("Post by deleted account", user_id=str(user_id))
        raise http_error(status.HTTP_404_NOT_FOUND, "User not found")
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise server_error()


@router.get("", response_model=list[PostView])
async def list_posts(
    user_id: CurrentUser,
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> list[PostView]:
    """List all posts, newest first."""
    try:
        return await list_posts_use_case.execute()
    except Exception as e:
        logfire.error("Unexpected error listing posts", error=str(e))
        raise server_error()


@router.get("/{post_id}", response_model=PostView)
async def get_post(
    post_id: str,
    user_id: CurrentUser,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostView:
    """Get a single post."""
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    except NotFoundError:
        raise http_error(status.HTTP_404_NOT_FOUND, POST_NOT_FOUND)
    except Exception as e:
        logfire.error("Unexpected error loading post", error=str(e))
        raise server_error()


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    user_id: CurrentUser,
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> MessageResponse:
    """Delete one of the caller's posts."""
    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(user_id=user_id, post_id=post_id)
        )
    except NotFoundError:
        raise http_error(status.HTTP_404_NOT_FOUND, POST_NOT_FOUND)
    except NotAuthorizedError:
        raise http_error(status.HTTP_401_UNAUTHORIZED, "User is not authorised")
    except Exception as e:
        logfire.error("Unexpected error deleting post", error=str(e))
        raise server_error()


@router.put("/like/{post_id}", response_model=list[LikeView])
async def like_post(
    post_id: str,
    user_id: CurrentUser,
    like_post_use_case: FromDishka[LikePostUseCase],
) -> list[LikeView]:
    """Like a post. Returns the post's likes."""
    try:
        return await like_post_use_case.execute(
            LikeRequest(user_id=user_id, post_id=post_id)
        )
    except NotFoundError:
        raise http_error(status.HTTP_404_NOT_FOUND, POST_NOT_FOUND)
    except AlreadyLikedError:
        raise http_error(status.HTTP_400_BAD_REQUEST, "Post already liked")
    except Exception as e:
        logfire.error("Unexpected error liking post", error=str(e))
        raise server_error()


@router.put("/unlike/{post_id}", response_model=list[LikeView])
async def unlike_post(
    post_id: str,
    user_id: CurrentUser,
    unlike_post_use_case: FromDishka[UnlikePostUseCase],
) -> list[LikeView]:
    """Take back a like. Returns the post's remaining likes."""
    try:
        return await unlike_post_use_case.execute(
            LikeRequest(user_id=user_id, post_id=post_id)
        )
    except NotFoundError:
        raise http_error(status.HTTP_404_NOT_FOUND, POST_NOT_FOUND)
    except NotLikedError:
        raise http_error(status.HTTP_400_BAD_REQUEST, "Post has not been liked")
    except Exception as e:
        logfire.error("Unexpected error unliking post", error=str(e))
        raise server_error()


@router.post("/comment/{post_id}", response_model=list[CommentView])
async def add_comment(
    post_id: str,
    user_id: CurrentUser,
    request: TextAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
) -> list[CommentView]:
    """Comment on a post. Returns the post's comments."""
    try:
        return await add_comment_use_case.execute(
            AddCommentRequest(user_id=user_id, post_id=post_id, text=request.text)
        )
    except NotFoundError as e:
        msg = POST_NOT_FOUND if e.resource == "Post" else "User not found"
        raise http_error(status.HTTP_404_NOT_FOUND, msg)
    except Exception as e:
        logfire.error("Unexpected error adding comment", error=str(e))
        raise server_error()


@router.delete("/comment/{post_id}/{comment_id}", response_model=list[CommentView])
async def remove_comment(
    post_id: str,
    comment_id: str,
    user_id: CurrentUser,
    remove_comment_use_case: FromDishka[RemoveCommentUseCase],
) -> list[CommentView]:
    """Delete one of the caller's comments. Returns the remaining comments."""
    try:
        return await remove_comment_use_case.execute(
            RemoveCommentRequest(
                user_id=user_id, post_id=post_id, comment_id=comment_id
            )
        )
    except NotFoundError as e:
        msg = POST_NOT_FOUND if e.resource == "Post" else "Comment does not exist"
        raise http_error(status.HTTP_404_NOT_FOUND, msg)
    except NotAuthorizedError:
        raise http_error(status.HTTP_401_UNAUTHORIZED, "User not authorised")
    except Exception as e:
        logfire.error("Unexpected error removing comment", error=str(e))
        raise server_error()
