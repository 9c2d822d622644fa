"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from fellowship.domain.service import DiscussionService
from fellowship.domain.value import CommentId, Principal, Role, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author or admin)
    user_role: Role = Role.USER


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    success: bool
    message: str


class DeleteCommentUseCase:
    """Use case for soft-deleting a comment."""

    def __init__(self, discussion_service: DiscussionService) -> None:
        """Initialize delete comment use case.

        Args:
            discussion_service: Discussion domain service
        """
        self.discussion_service = discussion_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Args:
            request: Delete comment request

        Returns:
            Delete comment response

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If user doesn't own the comment and isn't an admin
            ContentNotActiveError: If the comment is already deleted or reported
        """
        await self.discussion_service.delete_comment(
            actor=Principal(id=UserId(UUID(request.user_id)), role=request.user_role),
            comment_id=CommentId(UUID(request.comment_id)),
        )

        return DeleteCommentResponse(
            success=True,
            message="Comment deleted successfully",
        )
