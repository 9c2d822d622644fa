"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .post import InMemoryPostRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryPostRepository",
]
