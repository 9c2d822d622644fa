"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from fellowship.domain.service import DiscussionService
from fellowship.domain.value import (
    CommentId,
    Language,
    PostId,
    Principal,
    Role,
    UserId,
)

from .comment_item import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    content: str
    author_id: str  # User ID from authenticated user
    author_role: Role = Role.USER
    parent_id: str | None = None  # Parent comment ID for replies
    language: Language = Language.KOREAN
    is_anonymous: bool = False


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase:
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(self, discussion_service: DiscussionService) -> None:
        """Initialize create comment use case.

        Args:
            discussion_service: Discussion domain service
        """
        self.discussion_service = discussion_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        The discussion service validates the post and parent, saves the
        comment and updates the parent's reply count and the post's
        comment count.

        Args:
            request: Create comment request

        Returns:
            Create comment response with comment details
        """
        actor = Principal(id=UserId(UUID(request.author_id)), role=request.author_role)
        parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None

        comment = await self.discussion_service.post_comment(
            actor=actor,
            post_id=PostId(UUID(request.post_id)),
            content=request.content,
            parent_id=parent_id,
            language=request.language,
            is_anonymous=request.is_anonymous,
        )

        return CreateCommentResponse(
            comment=CommentItem.from_comment(comment, viewer_id=actor.id)
        )
