"""Post domain service.

The discussion engine's view of the post aggregate: existence and status
lookups, and comment count adjustments. Everything else about posts lives
in the surrounding platform.
"""

import logfire

from fellowship.domain.error import PostNotFoundError
from fellowship.domain.model.post import Post
from fellowship.domain.repository import PostRepository
from fellowship.domain.value import PostId

from .base import Service


class PostService(Service):
    """Domain service for post aggregate operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def save_post(self, post: Post) -> Post:
        """Save a post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        with logfire.span(
            "post_service.save_post", post_id=str(post.id), status=post.status.value
        ):
            saved = await self.post_repository.save(post)
            logfire.info("Post saved", post_id=str(saved.id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if post:
                logfire.info(
                    "Post found", post_id=str(post_id), status=post.status.value
                )
            else:
                logfire.warn("Post not found", post_id=str(post_id))
            return post

    async def increment_comment_count(self, post_id: PostId, delta: int) -> Post:
        """Apply a signed change to a post's comment count (floored at 0).

        Uses a storage-level update so concurrent callers don't lose writes.

        Args:
            post_id: Post ID
            delta: Change to apply (+1 on create, -1 when a comment leaves active)

        Returns:
            Updated post

        Raises:
            PostNotFoundError: If post not found
        """
        with logfire.span(
            "post_service.increment_comment_count", post_id=str(post_id), delta=delta
        ):
            updated = await self.post_repository.increment_comment_count(
                post_id, delta
            )
            if updated is None:
                logfire.error(
                    "Post not found for comment count update", post_id=str(post_id)
                )
                raise PostNotFoundError(str(post_id))

            logfire.info(
                "Comment count updated",
                post_id=str(post_id),
                delta=delta,
                new_count=updated.comment_count,
            )
            return updated
