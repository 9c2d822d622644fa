"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from fellowship.domain.model import (
    Comment,
    CommentEdit,
    CommentLike,
    CommentReport,
    Post,
)
from fellowship.domain.value import (
    CommentId,
    CommentStatus,
    Language,
    PostId,
    PostStatus,
    ReportReason,
    UserId,
)


def _uuid(value: Any) -> UUID:
    """Accept UUIDs returned either as strings or as UUID objects."""
    return UUID(value) if isinstance(value, str) else value


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        status=PostStatus(row["status"]),
        comment_count=row["comment_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return post.model_dump(mode="python") | {"status": post.status.value}


def row_to_like(row: Dict[str, Any]) -> CommentLike:
    """Convert comment_likes row to CommentLike."""
    return CommentLike(
        user_id=UserId(_uuid(row["user_id"])),
        created_at=row["created_at"],
    )


def row_to_report(row: Dict[str, Any]) -> CommentReport:
    """Convert comment_reports row to CommentReport."""
    return CommentReport(
        reported_by=UserId(_uuid(row["reported_by"])),
        reason=ReportReason(row["reason"]),
        description=row.get("description"),
        reported_at=row["reported_at"],
    )


def row_to_edit(row: Dict[str, Any]) -> CommentEdit:
    """Convert comment_edits row to CommentEdit."""
    return CommentEdit(
        edited_at=row["edited_at"],
        reason=row["reason"],
        previous_content=row["previous_content"],
    )


def row_to_comment(
    row: Dict[str, Any],
    likes: Iterable[CommentLike] = (),
    reports: Iterable[CommentReport] = (),
    edits: Iterable[CommentEdit] = (),
) -> Comment:
    """Convert database row plus its child records to Comment domain model.

    like_count and report_count are taken from the child records so the
    model invariants hold even if a row was read mid-update.

    Args:
        row: comments row as dict
        likes: Likes of the comment
        reports: Reports of the comment
        edits: Edit history, oldest first

    Returns:
        Comment domain model
    """
    likes_by_user = {like.user_id: like for like in likes}
    reports_by_user = {report.reported_by: report for report in reports}
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        depth=row["depth"],
        language=Language(row["language"]),
        is_anonymous=row["is_anonymous"],
        status=CommentStatus(row["status"]),
        likes=likes_by_user,
        like_count=len(likes_by_user),
        reports=reports_by_user,
        report_count=len(reports_by_user),
        reply_count=row["reply_count"],
        is_edited=row["is_edited"],
        last_edited_at=row.get("last_edited_at"),
        edit_history=list(edits),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to a comments row dict.

    Likes, reports and edits live in their own tables.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = comment.model_dump(exclude={"likes", "reports", "edit_history"})
    data["language"] = comment.language.value
    data["status"] = comment.status.value
    return data


def like_to_dict(comment_id: CommentId, like: CommentLike) -> Dict[str, Any]:
    """Convert CommentLike to a comment_likes row dict."""
    return {"comment_id": comment_id, **like.model_dump()}


def report_to_dict(comment_id: CommentId, report: CommentReport) -> Dict[str, Any]:
    """Convert CommentReport to a comment_reports row dict."""
    return {
        "comment_id": comment_id,
        **report.model_dump(),
        "reason": report.reason.value,
    }


def edit_to_dict(comment_id: CommentId, edit: CommentEdit) -> Dict[str, Any]:
    """Convert CommentEdit to a comment_edits row dict."""
    return {"comment_id": comment_id, **edit.model_dump()}
