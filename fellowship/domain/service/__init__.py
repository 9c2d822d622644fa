"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .counter_ledger import CounterEffects
from .discussion_service import DiscussionService
from .moderation_policy import ModerationEvent, ModerationPolicy
from .post_service import PostService

__all__ = [
    "CommentService",
    "CounterEffects",
    "DiscussionService",
    "ModerationEvent",
    "ModerationPolicy",
    "PostService",
    "Service",
]
