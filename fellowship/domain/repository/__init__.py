"""Repository interfaces for Fellowship domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from fellowship.domain.repository.comment import CommentRepository
from fellowship.domain.repository.post import PostRepository

__all__ = [
    "PostRepository",
    "CommentRepository",
]
