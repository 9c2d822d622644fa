"""Unit tests for row <-> domain model mappers."""

from datetime import datetime
from uuid import uuid4

from fellowship.domain.model import CommentEdit, CommentLike, CommentReport
from fellowship.domain.value import (
    CommentStatus,
    Language,
    PostId,
    PostStatus,
    ReportReason,
    UserId,
)
from fellowship.persistence.mappers import (
    comment_to_dict,
    post_to_dict,
    report_to_dict,
    row_to_comment,
    row_to_post,
)
from tests.conftest import make_comment, make_post


class TestPostMapping:
    """Posts map to rows and back."""

    def test_row_to_post_accepts_string_ids(self):
        post = make_post(status=PostStatus.CLOSED, comment_count=3)
        row = post_to_dict(post)
        row["id"] = str(row["id"])
        row["author_id"] = str(row["author_id"])

        result = row_to_post(row)

        assert result == post
        assert row["status"] == "closed"


class TestCommentMapping:
    """Comments split into a row plus child records."""

    def test_comment_row_excludes_child_records(self):
        comment = make_comment(PostId(uuid4()), language=Language.VIETNAMESE)

        row = comment_to_dict(comment)

        assert "likes" not in row
        assert "reports" not in row
        assert "edit_history" not in row
        assert row["language"] == "vietnamese"
        assert row["status"] == "active"
        assert row["like_count"] == 0

    def test_counts_derived_from_child_records(self):
        comment = make_comment(PostId(uuid4()), status=CommentStatus.REPORTED)
        row = comment_to_dict(comment)
        # Stale stored counters are ignored in favour of the records
        row["like_count"] = 7
        row["report_count"] = 0
        liker = UserId(uuid4())
        reporter = UserId(uuid4())
        edit = CommentEdit(edited_at=datetime.now(), previous_content="Before")

        result = row_to_comment(
            row,
            likes=[CommentLike(user_id=liker)],
            reports=[CommentReport(reported_by=reporter, reason=ReportReason.SPAM)],
            edits=[edit],
        )

        assert result.like_count == 1
        assert result.is_liked_by(liker)
        assert result.report_count == 1
        assert result.is_reported_by(reporter)
        assert result.edit_history == [edit]
        assert result.status == CommentStatus.REPORTED

    def test_report_row_uses_enum_value(self):
        comment_id = make_comment(PostId(uuid4())).id
        report = CommentReport(
            reported_by=UserId(uuid4()),
            reason=ReportReason.HARASSMENT,
            description="Repeated insults",
        )

        row = report_to_dict(comment_id, report)

        assert row["comment_id"] == comment_id
        assert row["reason"] == "harassment"
        assert row["description"] == "Repeated insults"
