"""Domain value objects for Fellowship."""

from fellowship.domain.value.identifiers import CommentId, PostId, UserId
from fellowship.domain.value.types import (
    CommentStatus,
    Language,
    LikeState,
    PostStatus,
    Principal,
    ReportOutcome,
    ReportReason,
    Role,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    # Types
    "CommentStatus",
    "PostStatus",
    "Role",
    "ReportReason",
    "Language",
    "Principal",
    "LikeState",
    "ReportOutcome",
]
