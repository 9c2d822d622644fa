"""Unit tests for ModerationPolicy."""

from uuid import uuid4

import pytest

from fellowship.domain.error import InvalidStatusTransitionError
from fellowship.domain.model import CommentReport
from fellowship.domain.service import ModerationEvent, ModerationPolicy
from fellowship.domain.value import CommentStatus, PostId, ReportReason, UserId
from tests.conftest import make_comment


def _with_reports(count: int, status: CommentStatus = CommentStatus.ACTIVE):
    reports = {}
    for _ in range(count):
        reporter = UserId(uuid4())
        reports[reporter] = CommentReport(
            reported_by=reporter, reason=ReportReason.SPAM
        )
    return make_comment(
        PostId(uuid4()), reports=reports, report_count=count, status=status
    )


class TestTransitions:
    """State machine transitions."""

    @pytest.mark.parametrize(
        "event, target",
        [
            (ModerationEvent.REPORT_THRESHOLD_REACHED, CommentStatus.REPORTED),
            (ModerationEvent.DELETED_BY_OWNER, CommentStatus.DELETED),
            (ModerationEvent.HIDDEN_BY_ADMIN, CommentStatus.HIDDEN),
        ],
    )
    def test_active_transitions(self, event, target):
        policy = ModerationPolicy()

        assert policy.can_transition(CommentStatus.ACTIVE, event)
        assert policy.next_status(CommentStatus.ACTIVE, event) == target

    @pytest.mark.parametrize(
        "status",
        [CommentStatus.DELETED, CommentStatus.REPORTED, CommentStatus.HIDDEN],
    )
    def test_inactive_statuses_are_terminal(self, status):
        policy = ModerationPolicy()

        assert policy.is_terminal(status)
        for event in ModerationEvent:
            assert not policy.can_transition(status, event)

    def test_active_is_not_terminal(self):
        assert not ModerationPolicy.is_terminal(CommentStatus.ACTIVE)

    def test_reported_cannot_return_to_active(self):
        policy = ModerationPolicy()

        with pytest.raises(InvalidStatusTransitionError):
            policy.next_status(
                CommentStatus.REPORTED, ModerationEvent.DELETED_BY_OWNER
            )


class TestAutoReport:
    """Threshold rule."""

    def test_below_threshold_stays_active(self):
        policy = ModerationPolicy(report_threshold=5)

        assert not policy.should_auto_report(_with_reports(4))

    def test_at_threshold_reports(self):
        policy = ModerationPolicy(report_threshold=5)

        assert policy.should_auto_report(_with_reports(5))

    def test_inactive_comment_never_auto_reported(self):
        policy = ModerationPolicy(report_threshold=5)

        assert not policy.should_auto_report(
            _with_reports(6, status=CommentStatus.DELETED)
        )

    def test_threshold_must_be_positive(self):
        with pytest.raises(ValueError, match="report_threshold"):
            ModerationPolicy(report_threshold=0)
