"""Post aggregate root.

Posts are owned by the surrounding platform. The discussion engine only
reads their status and adjusts comment_count through the post service.
"""

from datetime import datetime

from pydantic import Field

from fellowship.domain.model.common import DomainModel
from fellowship.domain.value import PostId, PostStatus, UserId


class Post(DomainModel):
    """Post aggregate root."""

    id: PostId
    author_id: UserId
    title: str = Field(min_length=1, max_length=200)
    status: PostStatus = PostStatus.ACTIVE
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_active(self) -> bool:
        """Whether the post accepts new comments."""
        return self.status == PostStatus.ACTIVE
