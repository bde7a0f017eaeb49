"""Post use cases."""

from .comment import (
    AddCommentRequest,
    AddCommentUseCase,
    RemoveCommentRequest,
    RemoveCommentUseCase,
)
from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostUseCase
from .get_post import GetPostRequest, GetPostUseCase, ListPostsUseCase
from .like_post import LikePostUseCase, LikeRequest, UnlikePostUseCase
from .views import CommentView, LikeView, MessageResponse, PostView

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "CommentView",
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "LikePostUseCase",
    "LikeRequest",
    "LikeView",
    "ListPostsUseCase",
    "MessageResponse",
    "PostView",
    "RemoveCommentRequest",
    "RemoveCommentUseCase",
    "UnlikePostUseCase",
]
