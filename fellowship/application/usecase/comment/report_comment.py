"""Report comment use case."""

from uuid import UUID

from pydantic import BaseModel

from fellowship.domain.service import DiscussionService
from fellowship.domain.value import (
    CommentId,
    CommentStatus,
    Principal,
    ReportReason,
    UserId,
)


class ReportCommentRequest(BaseModel):
    """Report comment request."""

    comment_id: str  # UUID string
    user_id: str  # Reporting user
    reason: ReportReason
    description: str | None = None


class ReportCommentResponse(BaseModel):
    """Report comment response."""

    status: CommentStatus
    report_count: int
    message: str


class ReportCommentUseCase:
    """Use case for reporting an abusive comment."""

    def __init__(self, discussion_service: DiscussionService) -> None:
        """Initialize report comment use case.

        Args:
            discussion_service: Discussion domain service
        """
        self.discussion_service = discussion_service

    async def execute(self, request: ReportCommentRequest) -> ReportCommentResponse:
        """Execute report comment flow.

        Args:
            request: Report comment request

        Returns:
            The comment's status and report count after the report

        Raises:
            NotFoundError: If the comment doesn't exist
            ContentNotActiveError: If the comment is no longer active
            SelfReportForbiddenError: If the user wrote the comment
            ValidationError: If the description is too long
        """
        outcome = await self.discussion_service.report_comment(
            actor=Principal(id=UserId(UUID(request.user_id))),
            comment_id=CommentId(UUID(request.comment_id)),
            reason=request.reason,
            description=request.description,
        )

        if outcome.recorded:
            message = "Report submitted"
        else:
            message = "Comment already reported by this user"

        return ReportCommentResponse(
            status=outcome.status,
            report_count=outcome.report_count,
            message=message,
        )
