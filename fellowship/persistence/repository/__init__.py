"""PostgreSQL repository implementations."""

from fellowship.persistence.repository.comment import PostgresCommentRepository
from fellowship.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresCommentRepository",
]
