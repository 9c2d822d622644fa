"""Unit tests for ToggleLikeUseCase."""

from uuid import uuid4

import pytest

from fellowship.application.usecase.comment import (
    ToggleLikeRequest,
    ToggleLikeUseCase,
)
from fellowship.domain.repository import CommentRepository
from fellowship.domain.value import PostId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestToggleLikeUseCase:
    """Tests for ToggleLikeUseCase."""

    @pytest.mark.asyncio
    async def test_like_and_unlike(self, unit_env):
        """Toggling twice returns to the original state."""
        # Arrange
        use_case = await unit_env.get(ToggleLikeUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(PostId(uuid4())))
        request = ToggleLikeRequest(comment_id=str(comment.id), user_id=str(uuid4()))

        # Act
        liked = await use_case.execute(request)
        unliked = await use_case.execute(request)

        # Assert
        assert liked.is_liked is True
        assert liked.like_count == 1
        assert unliked.is_liked is False
        assert unliked.like_count == 0
