"""In-memory post repository for testing."""

from datetime import datetime
from typing import Optional

from fellowship.domain.model.post import Post
from fellowship.domain.repository.post import PostRepository
from fellowship.domain.service.counter_ledger import floor_count
from fellowship.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post

    async def increment_comment_count(
        self, post_id: PostId, delta: int
    ) -> Optional[Post]:
        """Atomically add delta to the comment count (minimum 0)."""
        post = self._posts.get(post_id)
        if post is None:
            return None

        # Create updated post (since posts are immutable)
        updated = post.model_copy(
            update={
                "comment_count": floor_count(post.comment_count + delta),
                "updated_at": datetime.now(),
            }
        )
        self._posts[post_id] = updated
        return updated
