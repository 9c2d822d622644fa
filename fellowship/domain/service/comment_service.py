"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from fellowship.domain.error import (
    MaxDepthExceededError,
    NotFoundError,
    ParentCommentNotActiveError,
    ParentCommentNotFoundError,
    PostNotActiveError,
    PostNotFoundError,
    ValidationError,
)
from fellowship.domain.model.comment import (
    CONTENT_MAX_LENGTH,
    DEFAULT_EDIT_REASON,
    Comment,
    CommentEdit,
    CommentReport,
)
from fellowship.domain.repository import CommentRepository
from fellowship.domain.value import (
    CommentId,
    CommentStatus,
    Language,
    PostId,
    UserId,
)

from .base import Service
from .post_service import PostService

DEFAULT_MAX_DEPTH = 3


def normalize_content(content: str) -> str:
    """Trim content and check it is within length bounds.

    Raises:
        ValidationError: If the trimmed content is empty or too long
    """
    text = content.strip()
    if not 1 <= len(text) <= CONTENT_MAX_LENGTH:
        raise ValidationError(
            f"Comment content must be 1-{CONTENT_MAX_LENGTH} characters"
        )
    return text


class CommentService(Service):
    """Domain service for the comment tree.

    Persists comments and resolves their post and parent relationships.
    Counter side effects of writes are the discussion service's job.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_service: Post domain service (post existence and status)
            max_depth: Deepest allowed nesting level (0 is top-level)
        """
        self.comment_repository = comment_repository
        self.post_service = post_service
        self.max_depth = max_depth

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
        language: Language = Language.KOREAN,
        is_anonymous: bool = False,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Depth is derived from the resolved parent, never taken from input.
        All checks run before anything is written.

        Args:
            post_id: Post ID
            author_id: Author user ID
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)
            language: Language of the comment
            is_anonymous: Whether to hide the author when listed

        Returns:
            Created comment

        Raises:
            ValidationError: If content is out of bounds
            PostNotFoundError: If the post doesn't exist
            PostNotActiveError: If the post is not active
            ParentCommentNotFoundError: If the parent doesn't exist on this post
            ParentCommentNotActiveError: If the parent is not active
            MaxDepthExceededError: If the reply would nest too deep
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            text = normalize_content(content)

            post = await self.post_service.get_post_by_id(post_id)
            if post is None:
                raise PostNotFoundError(str(post_id))
            if not post.is_active:
                logfire.warn(
                    "Comment on inactive post",
                    post_id=str(post_id),
                    status=post.status.value,
                )
                raise PostNotActiveError(str(post_id), post.status.value)

            # If replying, verify parent and calculate depth
            depth = 0
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if parent is None or parent.post_id != post_id:
                    logfire.error(
                        "Parent comment not found on post",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise ParentCommentNotFoundError(str(parent_id))
                if not parent.is_active:
                    logfire.warn(
                        "Reply to inactive comment",
                        parent_id=str(parent_id),
                        status=parent.status.value,
                    )
                    raise ParentCommentNotActiveError(
                        str(parent_id), parent.status.value
                    )
                depth = parent.depth + 1
                if depth > self.max_depth:
                    logfire.warn(
                        "Reply exceeds maximum depth",
                        parent_id=str(parent_id),
                        parent_depth=parent.depth,
                        max_depth=self.max_depth,
                    )
                    raise MaxDepthExceededError(str(parent_id), self.max_depth)

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                content=text,
                parent_id=parent_id,
                depth=depth,
                language=language,
                is_anonymous=is_anonymous,
                status=CommentStatus.ACTIVE,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                depth=depth,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID or fail.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        comment = await self.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("comment", str(comment_id))
        return comment

    async def get_top_level_comments(
        self, post_id: PostId, limit: int, offset: int = 0
    ) -> list[Comment]:
        """Get a page of active top-level comments for a post."""
        with logfire.span(
            "comment_service.get_top_level_comments",
            post_id=str(post_id),
            limit=limit,
            offset=offset,
        ):
            comments = await self.comment_repository.find_top_level(
                post_id=post_id, limit=limit, offset=offset
            )
            logfire.info(
                "Top-level comments retrieved",
                post_id=str(post_id),
                count=len(comments),
            )
            return comments

    async def get_replies(self, parent_id: CommentId) -> list[Comment]:
        """Get the active direct replies of a comment."""
        return await self.comment_repository.find_children(parent_id)

    async def count_active_children(self, parent_id: CommentId) -> int:
        """Count active direct replies of a comment."""
        return await self.comment_repository.count_active_children(parent_id)

    async def count_active_top_level(self, post_id: PostId) -> int:
        """Count active top-level comments of a post."""
        return await self.comment_repository.count_active_top_level(post_id)

    async def set_status(
        self,
        comment_id: CommentId,
        status: CommentStatus,
        expected: CommentStatus = CommentStatus.ACTIVE,
    ) -> Comment | None:
        """Change a comment's status if it is still in the expected status.

        Args:
            comment_id: Comment ID
            status: New status
            expected: Status the comment must currently have

        Returns:
            Updated comment, None if missing or already moved by another caller
        """
        with logfire.span(
            "comment_service.set_status",
            comment_id=str(comment_id),
            expected=expected.value,
            status=status.value,
        ):
            updated = await self.comment_repository.transition_status(
                comment_id, expected, status
            )
            if updated:
                logfire.info(
                    "Comment status changed",
                    comment_id=str(comment_id),
                    status=status.value,
                )
            else:
                logfire.warn(
                    "Comment status unchanged",
                    comment_id=str(comment_id),
                    expected=expected.value,
                )
            return updated

    async def recount_replies(self, parent_id: CommentId) -> Comment | None:
        """Recompute a comment's reply count from its active children.

        Args:
            parent_id: Comment whose reply count to refresh

        Returns:
            Updated parent, None if it no longer exists
        """
        with logfire.span(
            "comment_service.recount_replies", parent_id=str(parent_id)
        ):
            count = await self.comment_repository.count_active_children(parent_id)
            updated = await self.comment_repository.update_reply_count(
                parent_id, count
            )
            logfire.info(
                "Reply count recomputed", parent_id=str(parent_id), reply_count=count
            )
            return updated

    async def update_content(
        self,
        comment_id: CommentId,
        content: str,
        reason: str | None = None,
    ) -> Comment | None:
        """Replace a comment's content and record the edit.

        Args:
            comment_id: Comment ID
            content: New content
            reason: Why the comment was edited

        Returns:
            Updated comment, None if the comment doesn't exist or is not active

        Raises:
            ValidationError: If content is out of bounds
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment_id),
            content_length=len(content),
        ):
            text = normalize_content(content)
            current = await self.comment_repository.find_by_id(comment_id)
            if current is None:
                logfire.warn(
                    "Comment not found for content update",
                    comment_id=str(comment_id),
                )
                return None

            edit = CommentEdit(
                edited_at=datetime.now(),
                reason=reason or DEFAULT_EDIT_REASON,
                previous_content=current.content,
            )
            updated = await self.comment_repository.update_content(
                comment_id, text, edit
            )

            if updated:
                logfire.info(
                    "Comment content updated",
                    comment_id=str(comment_id),
                    edits=len(updated.edit_history),
                )
            else:
                logfire.warn(
                    "Comment not active for content update",
                    comment_id=str(comment_id),
                )
            return updated

    async def add_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Record a like; False if user_id already liked the comment."""
        added = await self.comment_repository.add_like(comment_id, user_id)
        logfire.info(
            "Comment like added" if added else "Comment already liked",
            comment_id=str(comment_id),
            user_id=str(user_id),
        )
        return added

    async def remove_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Remove a like; False if user_id had not liked the comment."""
        removed = await self.comment_repository.remove_like(comment_id, user_id)
        logfire.info(
            "Comment like removed" if removed else "No like to remove",
            comment_id=str(comment_id),
            user_id=str(user_id),
        )
        return removed

    async def add_report(self, comment_id: CommentId, report: CommentReport) -> bool:
        """Record a report; False if the reporter already reported the comment."""
        recorded = await self.comment_repository.add_report(comment_id, report)
        logfire.info(
            "Comment report recorded" if recorded else "Duplicate report ignored",
            comment_id=str(comment_id),
            reported_by=str(report.reported_by),
            reason=report.reason.value,
        )
        return recorded
