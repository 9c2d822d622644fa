"""Comment representation shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from fellowship.domain.model import Comment
from fellowship.domain.value import CommentStatus, Language, UserId


class CommentItem(BaseModel):
    """Comment item in response.

    author_id is withheld for anonymous comments unless the viewer wrote them.
    """

    comment_id: str
    post_id: str
    author_id: str | None
    content: str
    parent_id: str | None
    depth: int
    language: Language
    is_anonymous: bool
    status: CommentStatus
    like_count: int
    report_count: int
    reply_count: int
    is_edited: bool
    last_edited_at: datetime | None
    created_at: datetime
    updated_at: datetime
    is_liked: bool

    @classmethod
    def from_comment(
        cls, comment: Comment, viewer_id: UserId | None = None
    ) -> "CommentItem":
        """Build a response item as seen by viewer_id (None when signed out)."""
        show_author = not comment.is_anonymous or comment.author_id == viewer_id
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id) if show_author else None,
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            depth=comment.depth,
            language=comment.language,
            is_anonymous=comment.is_anonymous,
            status=comment.status,
            like_count=comment.like_count,
            report_count=comment.report_count,
            reply_count=comment.reply_count,
            is_edited=comment.is_edited,
            last_edited_at=comment.last_edited_at,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            is_liked=viewer_id is not None and comment.is_liked_by(viewer_id),
        )
