"""Toggle like use case."""

from uuid import UUID

from pydantic import BaseModel

from fellowship.domain.service import DiscussionService
from fellowship.domain.value import CommentId, Principal, UserId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    is_liked: bool
    like_count: int


class ToggleLikeUseCase:
    """Use case for liking a comment or taking the like back."""

    def __init__(self, discussion_service: DiscussionService) -> None:
        """Initialize toggle like use case.

        Args:
            discussion_service: Discussion domain service
        """
        self.discussion_service = discussion_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Args:
            request: Toggle like request

        Returns:
            The user's like state and the comment's like count afterwards
        """
        state = await self.discussion_service.toggle_like(
            actor=Principal(id=UserId(UUID(request.user_id))),
            comment_id=CommentId(UUID(request.comment_id)),
        )

        return ToggleLikeResponse(is_liked=state.is_liked, like_count=state.like_count)
