"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from fellowship.domain.service import DiscussionService
from fellowship.domain.value import PostId, UserId

from .comment_item import CommentItem


class CommentThreadItem(BaseModel):
    """Top-level comment with its direct replies."""

    comment: CommentItem
    replies: list[CommentItem]


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string
    page: int = 1
    limit: int | None = None  # Defaults to the configured page size
    viewer_id: str | None = None  # Authenticated user, if any


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    threads: list[CommentThreadItem]
    page: int
    pages: int
    total: int


class GetCommentsUseCase:
    """Use case for listing a post's comments as threads."""

    def __init__(self, discussion_service: DiscussionService) -> None:
        """Initialize get comments use case.

        Args:
            discussion_service: Discussion domain service
        """
        self.discussion_service = discussion_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Only active comments are listed. Top-level comments come oldest first.

        Args:
            request: Get comments request with post ID, paging and optional viewer

        Returns:
            Page of threads with like state for the viewer
        """
        post_id = PostId(UUID(request.post_id))
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None

        comment_page = await self.discussion_service.list_comments(
            post_id=post_id,
            page=request.page,
            limit=request.limit,
        )

        threads = [
            CommentThreadItem(
                comment=CommentItem.from_comment(thread.comment, viewer_id),
                replies=[
                    CommentItem.from_comment(reply, viewer_id)
                    for reply in thread.replies
                ],
            )
            for thread in comment_page.threads
        ]

        return GetCommentsResponse(
            post_id=request.post_id,
            threads=threads,
            page=comment_page.page,
            pages=comment_page.pages,
            total=comment_page.total,
        )
