"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from fellowship.domain.service import DiscussionService
from fellowship.domain.value import CommentId, Principal, Role, UserId

from .comment_item import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author or admin)
    user_role: Role = Role.USER
    content: str  # New content (required, cannot be empty)
    reason: str | None = None


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentItem


class UpdateCommentUseCase:
    """Use case for updating a comment's content."""

    def __init__(self, discussion_service: DiscussionService) -> None:
        """Initialize update comment use case.

        Args:
            discussion_service: Discussion domain service
        """
        self.discussion_service = discussion_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request with comment ID, user and new content

        Returns:
            Updated comment details

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If user doesn't own the comment and isn't an admin
            ContentNotActiveError: If the comment was deleted or reported
            ValidationError: If the new content is empty or too long
        """
        actor = Principal(id=UserId(UUID(request.user_id)), role=request.user_role)

        comment = await self.discussion_service.edit_comment(
            actor=actor,
            comment_id=CommentId(UUID(request.comment_id)),
            content=request.content,
            reason=request.reason,
        )

        return UpdateCommentResponse(
            comment=CommentItem.from_comment(comment, viewer_id=actor.id)
        )
