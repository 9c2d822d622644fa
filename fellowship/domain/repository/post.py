"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from fellowship.domain.model.post import Post
from fellowship.domain.value import PostId


class PostRepository(ABC):
    """Repository for the Post aggregate.

    Only the pieces of the post aggregate the discussion engine relies on.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def increment_comment_count(
        self, post_id: PostId, delta: int
    ) -> Optional[Post]:
        """Atomically add delta to the comment count, never going below zero.

        Args:
            post_id: The post ID
            delta: Signed change to apply

        Returns:
            The updated post, None if not found
        """
        pass
