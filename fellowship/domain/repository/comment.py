"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from fellowship.domain.model.comment import Comment, CommentEdit, CommentReport
from fellowship.domain.value import CommentId, CommentStatus, PostId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.

    Every mutating method must be atomic on its own. Likes and reports are
    keyed by (comment, user) so repeated or concurrent calls from the same
    user never count twice.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found (in any status), None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(
        self,
        post_id: PostId,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Comment]:
        """Find active top-level comments of a post, oldest first.

        Args:
            post_id: The post ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Page of active comments with no parent
        """
        pass

    @abstractmethod
    async def find_children(
        self,
        parent_id: CommentId,
        include_inactive: bool = False,
    ) -> List[Comment]:
        """Find direct child comments of a parent comment, oldest first.

        Args:
            parent_id: The parent comment ID
            include_inactive: Whether to include deleted, hidden and reported replies

        Returns:
            List of child comments
        """
        pass

    @abstractmethod
    async def count_active_children(self, parent_id: CommentId) -> int:
        """Count direct children of a comment whose status is active."""
        pass

    @abstractmethod
    async def count_active_top_level(self, post_id: PostId) -> int:
        """Count active comments of a post that have no parent."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def transition_status(
        self,
        comment_id: CommentId,
        expected: CommentStatus,
        target: CommentStatus,
    ) -> Optional[Comment]:
        """Move a comment to target only if it is currently in expected.

        Args:
            comment_id: The comment ID
            expected: Status the comment must have for the change to apply
            target: New status

        Returns:
            The updated comment, or None if the comment is missing or its
            status was not expected (another caller won the transition)
        """
        pass

    @abstractmethod
    async def update_reply_count(
        self, comment_id: CommentId, reply_count: int
    ) -> Optional[Comment]:
        """Overwrite the stored reply count with a recomputed value."""
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str, edit: CommentEdit
    ) -> Optional[Comment]:
        """Replace the content of an active comment and append to its history.

        Returns:
            Updated comment, None if the comment is missing or not active
        """
        pass

    @abstractmethod
    async def add_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Record a like from user_id.

        Returns:
            True if the like was added, False if it already existed
        """
        pass

    @abstractmethod
    async def remove_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Remove the like from user_id.

        Returns:
            True if a like was removed, False if there was none
        """
        pass

    @abstractmethod
    async def add_report(self, comment_id: CommentId, report: CommentReport) -> bool:
        """Record a report unless the reporter has already reported this comment.

        Returns:
            True if the report was recorded, False if it was a duplicate
        """
        pass
