"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from fellowship.domain.model.comment import Comment, CommentEdit, CommentReport
from fellowship.domain.repository.comment import CommentRepository
from fellowship.domain.service import counter_ledger
from fellowship.domain.value import CommentId, CommentStatus, PostId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Methods don't await between reading and writing a record, so each one
    is atomic under asyncio.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_top_level(
        self,
        post_id: PostId,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Comment]:
        """Find active top-level comments of a post, oldest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.post_id == post_id and c.parent_id is None and c.is_active
        ]

        comments.sort(key=lambda c: c.created_at)

        # Paginate
        return comments[offset : offset + limit]

    async def find_children(
        self,
        parent_id: CommentId,
        include_inactive: bool = False,
    ) -> list[Comment]:
        """Find direct children of a comment."""
        comments = [c for c in self._comments.values() if c.parent_id == parent_id]

        if not include_inactive:
            comments = [c for c in comments if c.is_active]

        comments.sort(key=lambda c: c.created_at)

        return comments

    async def count_active_children(self, parent_id: CommentId) -> int:
        """Count active direct children of a comment."""
        return sum(
            1
            for c in self._comments.values()
            if c.parent_id == parent_id and c.is_active
        )

    async def count_active_top_level(self, post_id: PostId) -> int:
        """Count active top-level comments of a post."""
        return sum(
            1
            for c in self._comments.values()
            if c.post_id == post_id and c.parent_id is None and c.is_active
        )

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def transition_status(
        self,
        comment_id: CommentId,
        expected: CommentStatus,
        target: CommentStatus,
    ) -> Optional[Comment]:
        """Change status only if the current status is expected."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.status != expected:
            return None

        updated = comment.model_copy(
            update={"status": target, "updated_at": datetime.now()}
        )
        self._comments[comment_id] = updated
        return updated

    async def update_reply_count(
        self, comment_id: CommentId, reply_count: int
    ) -> Optional[Comment]:
        """Overwrite the reply count."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        updated = comment.model_copy(update={"reply_count": reply_count})
        self._comments[comment_id] = updated
        return updated

    async def update_content(
        self, comment_id: CommentId, content: str, edit: CommentEdit
    ) -> Optional[Comment]:
        """Replace content of an active comment and append the edit."""
        comment = self._comments.get(comment_id)
        if comment is None or not comment.is_active:
            return None

        updated = comment.model_copy(
            update={
                "content": content,
                "is_edited": True,
                "last_edited_at": edit.edited_at,
                "edit_history": [*comment.edit_history, edit],
                "updated_at": edit.edited_at,
            }
        )
        self._comments[comment_id] = updated
        return updated

    async def add_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Record a like keyed by user."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_liked_by(user_id):
            return False

        self._comments[comment_id] = counter_ledger.with_like(comment, user_id)
        return True

    async def remove_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Remove a like keyed by user."""
        comment = self._comments.get(comment_id)
        if comment is None or not comment.is_liked_by(user_id):
            return False

        self._comments[comment_id] = counter_ledger.without_like(comment, user_id)
        return True

    async def add_report(self, comment_id: CommentId, report: CommentReport) -> bool:
        """Record a report keyed by reporter."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_reported_by(report.reported_by):
            return False

        self._comments[comment_id] = counter_ledger.with_report(comment, report)
        return True
