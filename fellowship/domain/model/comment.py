"""Comment entity.

Comments are threaded discussions on posts, nested at most three levels
below a top-level comment. Engagement (likes, reports, replies) is kept as
denormalized counters next to the records they summarize.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from fellowship.domain.model.common import DomainModel
from fellowship.domain.value import (
    CommentId,
    CommentStatus,
    Language,
    PostId,
    ReportReason,
    UserId,
)

CONTENT_MAX_LENGTH = 1000
REPORT_DESCRIPTION_MAX_LENGTH = 500
DEFAULT_EDIT_REASON = "Content edited"


class CommentLike(DomainModel):
    """A single user's like on a comment."""

    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)


class CommentReport(DomainModel):
    """An abuse report filed by one user against a comment."""

    reported_by: UserId
    reason: ReportReason
    description: Optional[str] = Field(
        default=None, max_length=REPORT_DESCRIPTION_MAX_LENGTH
    )
    reported_at: datetime = Field(default_factory=datetime.now)


class CommentEdit(DomainModel):
    """Entry in a comment's append-only edit history."""

    edited_at: datetime = Field(default_factory=datetime.now)
    reason: str = DEFAULT_EDIT_REASON
    previous_content: str


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - depth: Nesting level (0 for top-level, parent depth + 1 for replies)

    Likes and reports are keyed by user so that each user contributes at
    most one of each. The *_count fields always match the keyed records;
    reply_count is recomputed from the live number of active children.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=CONTENT_MAX_LENGTH)
    parent_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0)
    language: Language = Language.KOREAN
    is_anonymous: bool = False
    status: CommentStatus = CommentStatus.ACTIVE
    likes: dict[UserId, CommentLike] = Field(default_factory=dict)
    like_count: int = Field(default=0, ge=0)
    reports: dict[UserId, CommentReport] = Field(default_factory=dict)
    report_count: int = Field(default=0, ge=0)
    reply_count: int = Field(default=0, ge=0)
    is_edited: bool = False
    last_edited_at: Optional[datetime] = None
    edit_history: list[CommentEdit] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_threading_and_counters(self) -> "Comment":
        """Validate depth against parent and counters against their records."""
        if self.parent_id is None and self.depth != 0:
            raise ValueError("Top-level comments must have depth 0")
        if self.parent_id is not None and self.depth == 0:
            raise ValueError("Replies must have depth greater than 0")
        if self.like_count != len(self.likes):
            raise ValueError("like_count must equal the number of likes")
        if self.report_count != len(self.reports):
            raise ValueError("report_count must equal the number of reports")
        return self

    @property
    def is_active(self) -> bool:
        """Whether the comment is visible and counted."""
        return self.status == CommentStatus.ACTIVE

    def is_liked_by(self, user_id: UserId) -> bool:
        """Whether user_id currently likes this comment."""
        return user_id in self.likes

    def is_reported_by(self, user_id: UserId) -> bool:
        """Whether user_id has already reported this comment."""
        return user_id in self.reports
