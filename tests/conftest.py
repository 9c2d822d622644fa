"""Test configuration and helpers."""

from datetime import datetime
from uuid import uuid4

from fellowship.domain.model import Comment, Post
from fellowship.domain.value import (
    CommentId,
    PostId,
    PostStatus,
    Principal,
    Role,
    UserId,
)


def make_principal(role: Role = Role.USER) -> Principal:
    """Build a principal with a fresh user ID."""
    return Principal(id=UserId(uuid4()), role=role)


def make_post(status: PostStatus = PostStatus.ACTIVE, comment_count: int = 0) -> Post:
    """Build a post with a fresh ID, ready to be saved."""
    now = datetime.now()
    return Post(
        id=PostId(uuid4()),
        author_id=UserId(uuid4()),
        title="Sunday service notes",
        status=status,
        comment_count=comment_count,
        created_at=now,
        updated_at=now,
    )


def make_comment(
    post_id: PostId,
    parent: Comment | None = None,
    author_id: UserId | None = None,
    content: str = "Praying for you all",
    **overrides,
) -> Comment:
    """Build a comment on post_id, as a reply to parent if given."""
    now = datetime.now()
    fields = {
        "id": CommentId(uuid4()),
        "post_id": post_id,
        "author_id": author_id or UserId(uuid4()),
        "content": content,
        "parent_id": parent.id if parent else None,
        "depth": parent.depth + 1 if parent else 0,
        "created_at": now,
        "updated_at": now,
    }
    fields.update(overrides)
    return Comment(**fields)
