"""Domain model entities for Fellowship."""

from fellowship.domain.model.comment import (
    Comment,
    CommentEdit,
    CommentLike,
    CommentReport,
)
from fellowship.domain.model.post import Post
from fellowship.domain.model.thread import CommentPage, CommentThread

__all__ = [
    "Post",
    "Comment",
    "CommentEdit",
    "CommentLike",
    "CommentReport",
    "CommentPage",
    "CommentThread",
]
