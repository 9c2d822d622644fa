"""Counter ledger.

Pure rules describing how each mutating event changes the denormalized
engagement counters. Nothing here touches storage: the discussion service
asks the ledger which effects an event has and applies them in the same
operation as the triggering write, and the in-memory repository uses the
like/report rules to evolve its records.

Post comment totals move by deltas through the post aggregate. Parent reply
counts are never incremented; they are recomputed from the live number of
active children so retried or interleaved operations converge.
"""

from datetime import datetime

from fellowship.domain.model.comment import Comment, CommentLike, CommentReport
from fellowship.domain.value import CommentStatus, UserId
from fellowship.domain.value.common import ValueObject


class CounterEffects(ValueObject):
    """Counter updates owed after a comment write."""

    post_comment_delta: int = 0
    recount_parent_replies: bool = False

    @property
    def is_empty(self) -> bool:
        """Whether the event leaves every counter untouched."""
        return self.post_comment_delta == 0 and not self.recount_parent_replies


NO_EFFECTS = CounterEffects()


def on_comment_created(comment: Comment) -> CounterEffects:
    """Effects of persisting a new comment."""
    if comment.status != CommentStatus.ACTIVE:
        return NO_EFFECTS
    return CounterEffects(
        post_comment_delta=1,
        recount_parent_replies=comment.parent_id is not None,
    )


def on_status_changed(
    comment: Comment, previous: CommentStatus, current: CommentStatus
) -> CounterEffects:
    """Effects of a status change.

    Only entering or leaving ACTIVE matters: a comment counts towards its
    post and its parent exactly while it is active.
    """
    was_active = previous == CommentStatus.ACTIVE
    is_active = current == CommentStatus.ACTIVE
    if was_active == is_active:
        return NO_EFFECTS
    return CounterEffects(
        post_comment_delta=1 if is_active else -1,
        recount_parent_replies=comment.parent_id is not None,
    )


def floor_count(value: int) -> int:
    """Clamp a counter at zero."""
    return max(0, value)


def with_like(
    comment: Comment, user_id: UserId, liked_at: datetime | None = None
) -> Comment:
    """Return comment with user_id's like recorded.

    A user who already likes the comment contributes nothing further.
    """
    if comment.is_liked_by(user_id):
        return comment
    likes = dict(comment.likes)
    likes[user_id] = CommentLike(user_id=user_id, created_at=liked_at or datetime.now())
    return comment.model_copy(
        update={"likes": likes, "like_count": comment.like_count + 1}
    )


def without_like(comment: Comment, user_id: UserId) -> Comment:
    """Return comment with user_id's like cleared."""
    if not comment.is_liked_by(user_id):
        return comment
    likes = {uid: like for uid, like in comment.likes.items() if uid != user_id}
    return comment.model_copy(
        update={"likes": likes, "like_count": floor_count(comment.like_count - 1)}
    )


def toggled_like(comment: Comment, user_id: UserId) -> Comment:
    """Return comment with user_id's like flipped.

    Applying it twice gives back the original likes and like_count.
    """
    if comment.is_liked_by(user_id):
        return without_like(comment, user_id)
    return with_like(comment, user_id)


def with_report(comment: Comment, report: CommentReport) -> Comment:
    """Return comment with report appended.

    A second report from the same user is a silent no-op.
    """
    if comment.is_reported_by(report.reported_by):
        return comment
    reports = dict(comment.reports)
    reports[report.reported_by] = report
    return comment.model_copy(
        update={"reports": reports, "report_count": comment.report_count + 1}
    )
