"""Unit tests for PostService."""

from uuid import uuid4

import pytest

from fellowship.domain.error import PostNotFoundError
from fellowship.domain.repository import PostRepository
from fellowship.domain.service import PostService
from fellowship.domain.value import PostId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestGetPost:
    """Tests for get_post_by_id method."""

    @pytest.mark.asyncio
    async def test_get_saved_post(self, unit_env):
        """Saved post should be returned by ID."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(make_post())

        # Act
        result = await post_service.get_post_by_id(post.id)

        # Assert
        assert result == post

    @pytest.mark.asyncio
    async def test_get_missing_post_returns_none(self, unit_env):
        """Unknown post ID should return None."""
        post_service = await unit_env.get(PostService)

        assert await post_service.get_post_by_id(PostId(uuid4())) is None


class TestIncrementCommentCount:
    """Tests for increment_comment_count method."""

    @pytest.mark.asyncio
    async def test_positive_and_negative_deltas(self, unit_env):
        """Deltas should be added to the stored count."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_service.save_post(make_post())

        # Act
        await post_service.increment_comment_count(post.id, 1)
        await post_service.increment_comment_count(post.id, 1)
        result = await post_service.increment_comment_count(post.id, -1)

        # Assert
        assert result.comment_count == 1
        stored = await post_repo.find_by_id(post.id)
        assert stored.comment_count == 1

    @pytest.mark.asyncio
    async def test_count_floored_at_zero(self, unit_env):
        """Count should never go below zero."""
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(make_post())

        result = await post_service.increment_comment_count(post.id, -1)

        assert result.comment_count == 0

    @pytest.mark.asyncio
    async def test_missing_post_raises(self, unit_env):
        """Unknown post should raise PostNotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(PostNotFoundError):
            await post_service.increment_comment_count(PostId(uuid4()), 1)
