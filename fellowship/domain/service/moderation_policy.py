"""Comment moderation policy."""

from enum import Enum

from fellowship.domain.error import InvalidStatusTransitionError
from fellowship.domain.model.comment import Comment
from fellowship.domain.value import CommentStatus

from .base import Service

DEFAULT_REPORT_THRESHOLD = 5


class ModerationEvent(str, Enum):
    """Events that move a comment between moderation states."""

    REPORT_THRESHOLD_REACHED = "report_threshold_reached"
    DELETED_BY_OWNER = "deleted_by_owner"
    HIDDEN_BY_ADMIN = "hidden_by_admin"


# Every allowed transition starts from ACTIVE; the other states are terminal.
_TRANSITIONS: dict[tuple[CommentStatus, ModerationEvent], CommentStatus] = {
    (
        CommentStatus.ACTIVE,
        ModerationEvent.REPORT_THRESHOLD_REACHED,
    ): CommentStatus.REPORTED,
    (CommentStatus.ACTIVE, ModerationEvent.DELETED_BY_OWNER): CommentStatus.DELETED,
    (CommentStatus.ACTIVE, ModerationEvent.HIDDEN_BY_ADMIN): CommentStatus.HIDDEN,
}


class ModerationPolicy(Service):
    """Decides comment status transitions.

    State machine (initial state ACTIVE):
    - ACTIVE -> REPORTED when distinct reports reach the threshold (one way)
    - ACTIVE -> DELETED on owner or admin deletion (soft)
    - ACTIVE -> HIDDEN on manual admin action outside the engine

    HIDDEN, REPORTED and DELETED have no outgoing transitions here; undoing
    them is a manual admin override.
    """

    def __init__(self, report_threshold: int = DEFAULT_REPORT_THRESHOLD) -> None:
        """Initialize moderation policy.

        Args:
            report_threshold: Distinct reports that force a comment to REPORTED
        """
        if report_threshold < 1:
            raise ValueError("report_threshold must be at least 1")
        self.report_threshold = report_threshold

    def can_transition(self, current: CommentStatus, event: ModerationEvent) -> bool:
        """Whether event is allowed from current."""
        return (current, event) in _TRANSITIONS

    def next_status(
        self, current: CommentStatus, event: ModerationEvent
    ) -> CommentStatus:
        """Status reached by applying event to a comment in current.

        Raises:
            InvalidStatusTransitionError: If the event is not allowed
        """
        try:
            return _TRANSITIONS[(current, event)]
        except KeyError:
            raise InvalidStatusTransitionError(current.value, event.value) from None

    @staticmethod
    def is_terminal(status: CommentStatus) -> bool:
        """Whether no engine event leads out of status."""
        return not any(current == status for current, _ in _TRANSITIONS)

    def should_auto_report(self, comment: Comment) -> bool:
        """Whether the comment has crossed the report threshold while active."""
        return (
            comment.status == CommentStatus.ACTIVE
            and comment.report_count >= self.report_threshold
        )
