"""Read models handed to the listing layer."""

from pydantic import Field

from fellowship.domain.model.comment import Comment
from fellowship.domain.model.common import DomainModel


class CommentThread(DomainModel):
    """A top-level comment with its active direct replies."""

    comment: Comment
    replies: list[Comment] = Field(default_factory=list)


class CommentPage(DomainModel):
    """One page of a post's discussion."""

    threads: list[CommentThread]
    page: int = Field(ge=1)
    pages: int = Field(ge=0)
    total: int = Field(ge=0)
