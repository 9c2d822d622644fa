"""Unit tests for DeleteCommentUseCase."""

from uuid import uuid4

import pytest

from fellowship.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from fellowship.domain.error import NotFoundError
from fellowship.domain.repository import CommentRepository, PostRepository
from fellowship.domain.value import CommentStatus
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_author_deletes_comment(self, unit_env):
        """Deleted comments keep their record with status deleted."""
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post(comment_count=1))
        comment = await comment_repo.save(make_comment(post.id))

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(
                comment_id=str(comment.id), user_id=str(comment.author_id)
            )
        )

        # Assert
        assert response.success is True
        stored = await comment_repo.find_by_id(comment.id)
        assert stored.status == CommentStatus.DELETED
        assert (await post_repo.find_by_id(post.id)).comment_count == 0

    @pytest.mark.asyncio
    async def test_missing_comment_raises(self, unit_env):
        """Unknown comments raise NotFoundError."""
        use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=str(uuid4()), user_id=str(uuid4()))
            )
