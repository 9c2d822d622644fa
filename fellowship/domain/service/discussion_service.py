"""Discussion domain service.

Orchestrates the comment tree, the counter ledger, the moderation policy and
the post aggregate. Each public operation runs its steps in a fixed order:
write the comment, recompute the parent's reply count, then adjust the post's
comment count. Reply counts are recomputed rather than incremented, so a
retried or interleaved operation converges on the right value instead of
drifting. Nothing is retried here; errors propagate to the caller.
"""

import math
from datetime import datetime

import logfire

from fellowship.domain.error import (
    ContentNotActiveError,
    NotAuthorizedError,
    PostNotActiveError,
    PostNotFoundError,
    SelfReportForbiddenError,
    ValidationError,
)
from fellowship.domain.model.comment import (
    REPORT_DESCRIPTION_MAX_LENGTH,
    Comment,
    CommentReport,
)
from fellowship.domain.model.thread import CommentPage, CommentThread
from fellowship.domain.value import (
    CommentId,
    CommentStatus,
    Language,
    LikeState,
    PostId,
    Principal,
    ReportOutcome,
    ReportReason,
)

from . import counter_ledger
from .base import Service
from .comment_service import CommentService
from .moderation_policy import ModerationEvent, ModerationPolicy
from .post_service import PostService

DEFAULT_PAGE_SIZE = 50


class DiscussionService(Service):
    """Domain service for threaded discussions and their engagement counters."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        moderation_policy: ModerationPolicy,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        """Initialize discussion service.

        Args:
            comment_service: Comment tree service
            post_service: Post aggregate service
            moderation_policy: Comment status state machine
            default_page_size: Threads per page when the caller gives no limit
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.moderation_policy = moderation_policy
        self.default_page_size = default_page_size

    async def post_comment(
        self,
        actor: Principal,
        post_id: PostId,
        content: str,
        parent_id: CommentId | None = None,
        language: Language = Language.KOREAN,
        is_anonymous: bool = False,
    ) -> Comment:
        """Create a comment or reply and update the counters it affects.

        Args:
            actor: Authenticated author
            post_id: Post to comment on
            content: Comment text
            parent_id: Comment being replied to (None for top-level)
            language: Language of the comment
            is_anonymous: Whether to hide the author when listed

        Returns:
            Created comment

        Raises:
            ValidationError: If content is out of bounds
            PostNotFoundError, PostNotActiveError: If the post can't be commented on
            ParentCommentNotFoundError, ParentCommentNotActiveError: If the
                parent can't be replied to
            MaxDepthExceededError: If the reply would nest too deep
        """
        with logfire.span(
            "discussion_service.post_comment",
            post_id=str(post_id),
            actor_id=str(actor.id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            comment = await self.comment_service.create_comment(
                post_id=post_id,
                author_id=actor.id,
                content=content,
                parent_id=parent_id,
                language=language,
                is_anonymous=is_anonymous,
            )
            await self._apply_effects(
                comment, counter_ledger.on_comment_created(comment)
            )
            return comment

    async def edit_comment(
        self,
        actor: Principal,
        comment_id: CommentId,
        content: str,
        reason: str | None = None,
    ) -> Comment:
        """Replace a comment's content. Counters are not affected.

        Args:
            actor: Author of the comment or an admin
            comment_id: Comment to edit
            content: New content
            reason: Optional reason recorded in the edit history

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If actor is neither author nor admin
            ContentNotActiveError: If the comment is not active
            ValidationError: If content is out of bounds
        """
        with logfire.span(
            "discussion_service.edit_comment",
            comment_id=str(comment_id),
            actor_id=str(actor.id),
        ):
            comment = await self.comment_service.get_comment(comment_id)
            self._authorize(actor, comment)
            self._require_active(comment)

            updated = await self.comment_service.update_content(
                comment_id, content, reason
            )
            if updated is None:
                # Deleted or reported between the read and the write
                current = await self.comment_service.get_comment(comment_id)
                raise ContentNotActiveError(
                    "comment", str(comment_id), current.status.value
                )
            return updated

    async def delete_comment(self, actor: Principal, comment_id: CommentId) -> Comment:
        """Soft-delete a comment and reverse the counters its creation applied.

        The record is kept for audit but no longer counted or listed.

        Args:
            actor: Author of the comment or an admin
            comment_id: Comment to delete

        Returns:
            The deleted comment

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If actor is neither author nor admin
            ContentNotActiveError: If the comment is not active
        """
        with logfire.span(
            "discussion_service.delete_comment",
            comment_id=str(comment_id),
            actor_id=str(actor.id),
        ):
            comment = await self.comment_service.get_comment(comment_id)
            self._authorize(actor, comment)
            self._require_active(comment)

            deleted = await self._transition(
                comment, ModerationEvent.DELETED_BY_OWNER
            )
            if deleted is None:
                current = await self.comment_service.get_comment(comment_id)
                raise ContentNotActiveError(
                    "comment", str(comment_id), current.status.value
                )

            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                actor_id=str(actor.id),
                by_admin=actor.is_admin and actor.id != comment.author_id,
            )
            return deleted

    async def toggle_like(self, actor: Principal, comment_id: CommentId) -> LikeState:
        """Like the comment, or remove the actor's like if present.

        Membership is keyed by user, so a user never counts more than once.

        Args:
            actor: User toggling their like
            comment_id: Comment to like

        Returns:
            Whether the actor now likes the comment and the resulting count

        Raises:
            NotFoundError: If the comment doesn't exist
            ContentNotActiveError: If the comment is not active
        """
        with logfire.span(
            "discussion_service.toggle_like",
            comment_id=str(comment_id),
            actor_id=str(actor.id),
        ):
            comment = await self.comment_service.get_comment(comment_id)
            self._require_active(comment)

            if comment.is_liked_by(actor.id):
                await self.comment_service.remove_like(comment_id, actor.id)
            else:
                await self.comment_service.add_like(comment_id, actor.id)

            refreshed = await self.comment_service.get_comment(comment_id)
            return LikeState(
                is_liked=refreshed.is_liked_by(actor.id),
                like_count=refreshed.like_count,
            )

    async def report_comment(
        self,
        actor: Principal,
        comment_id: CommentId,
        reason: ReportReason,
        description: str | None = None,
    ) -> ReportOutcome:
        """Report a comment, moving it to REPORTED at the report threshold.

        A repeat report from the same user is recorded once and otherwise
        ignored without error.

        Args:
            actor: Reporting user
            comment_id: Comment to report
            reason: Report reason
            description: Optional free-text details

        Returns:
            Resulting status and report count, and whether this report was new

        Raises:
            NotFoundError: If the comment doesn't exist
            ContentNotActiveError: If the comment is not active
            SelfReportForbiddenError: If actor wrote the comment
            ValidationError: If the description is too long
        """
        with logfire.span(
            "discussion_service.report_comment",
            comment_id=str(comment_id),
            actor_id=str(actor.id),
            reason=reason.value,
        ):
            comment = await self.comment_service.get_comment(comment_id)
            self._require_active(comment)
            if comment.author_id == actor.id:
                logfire.warn(
                    "Self report rejected",
                    comment_id=str(comment_id),
                    actor_id=str(actor.id),
                )
                raise SelfReportForbiddenError(str(comment_id))
            if description and len(description) > REPORT_DESCRIPTION_MAX_LENGTH:
                raise ValidationError(
                    f"Report description must be at most "
                    f"{REPORT_DESCRIPTION_MAX_LENGTH} characters"
                )

            recorded = await self.comment_service.add_report(
                comment_id,
                CommentReport(
                    reported_by=actor.id,
                    reason=reason,
                    description=description,
                    reported_at=datetime.now(),
                ),
            )

            current = await self.comment_service.get_comment(comment_id)
            if self.moderation_policy.should_auto_report(current):
                moved = await self._transition(
                    current, ModerationEvent.REPORT_THRESHOLD_REACHED
                )
                if moved is not None:
                    logfire.warn(
                        "Comment auto-reported",
                        comment_id=str(comment_id),
                        report_count=moved.report_count,
                        threshold=self.moderation_policy.report_threshold,
                    )
                    current = moved
                else:
                    current = await self.comment_service.get_comment(comment_id)

            return ReportOutcome(
                status=current.status,
                report_count=current.report_count,
                recorded=recorded,
            )

    async def list_comments(
        self, post_id: PostId, page: int = 1, limit: int | None = None
    ) -> CommentPage:
        """Get a page of a post's active discussion.

        Top-level comments come oldest first, each with its active direct
        replies.

        Args:
            post_id: Post whose comments to list
            page: 1-based page number
            limit: Threads per page (defaults to the configured page size)

        Returns:
            Page of comment threads with pagination totals

        Raises:
            PostNotFoundError, PostNotActiveError: If the post is not listable
            ValidationError: If page or limit is not positive
        """
        limit = limit or self.default_page_size
        if page < 1 or limit < 1:
            raise ValidationError("page and limit must be positive")

        with logfire.span(
            "discussion_service.list_comments",
            post_id=str(post_id),
            page=page,
            limit=limit,
        ):
            post = await self.post_service.get_post_by_id(post_id)
            if post is None:
                raise PostNotFoundError(str(post_id))
            if not post.is_active:
                raise PostNotActiveError(str(post_id), post.status.value)

            top_level = await self.comment_service.get_top_level_comments(
                post_id, limit=limit, offset=(page - 1) * limit
            )
            threads = [
                CommentThread(
                    comment=comment,
                    replies=await self.comment_service.get_replies(comment.id),
                )
                for comment in top_level
            ]
            total = await self.comment_service.count_active_top_level(post_id)

            return CommentPage(
                threads=threads,
                page=page,
                pages=math.ceil(total / limit),
                total=total,
            )

    async def _transition(
        self, comment: Comment, event: ModerationEvent
    ) -> Comment | None:
        """Apply a moderation event and the counter effects of leaving its status.

        Returns:
            Updated comment, None if another caller changed the status first
        """
        target = self.moderation_policy.next_status(comment.status, event)
        updated = await self.comment_service.set_status(
            comment.id, target, expected=comment.status
        )
        if updated is None:
            return None

        await self._apply_effects(
            updated,
            counter_ledger.on_status_changed(updated, comment.status, target),
        )
        return updated

    async def _apply_effects(
        self, comment: Comment, effects: counter_ledger.CounterEffects
    ) -> None:
        """Apply ledger effects: parent reply count first, then the post."""
        if effects.is_empty:
            return

        if effects.recount_parent_replies and comment.parent_id:
            await self.comment_service.recount_replies(comment.parent_id)

        if effects.post_comment_delta:
            await self.post_service.increment_comment_count(
                comment.post_id, effects.post_comment_delta
            )

    @staticmethod
    def _authorize(actor: Principal, comment: Comment) -> None:
        """Check actor may modify comment (author or admin)."""
        if not actor.can_manage(comment.author_id):
            logfire.warn(
                "Unauthorized comment modification",
                comment_id=str(comment.id),
                actor_id=str(actor.id),
            )
            raise NotAuthorizedError("comment", str(comment.id), str(actor.id))

    @staticmethod
    def _require_active(comment: Comment) -> None:
        """Check comment is still active."""
        if not comment.is_active:
            raise ContentNotActiveError(
                "comment", str(comment.id), comment.status.value
            )
