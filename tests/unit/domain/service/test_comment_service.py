"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from fellowship.domain.error import (
    MaxDepthExceededError,
    NotFoundError,
    ParentCommentNotActiveError,
    ParentCommentNotFoundError,
    PostNotActiveError,
    PostNotFoundError,
    ValidationError,
)
from fellowship.domain.repository import CommentRepository
from fellowship.domain.service import CommentService, PostService
from fellowship.domain.value import (
    CommentId,
    CommentStatus,
    Language,
    PostId,
    PostStatus,
    UserId,
)
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment_with_depth_zero(self, unit_env):
        """Top-level comment should have depth 0 and trimmed content."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(make_post())
        author_id = UserId(uuid4())

        # Act
        result = await comment_service.create_comment(
            post_id=post.id,
            author_id=author_id,
            content="  Amen!  ",
            language=Language.ENGLISH,
            is_anonymous=True,
        )

        # Assert
        assert result.depth == 0
        assert result.parent_id is None
        assert result.content == "Amen!"
        assert result.language == Language.ENGLISH
        assert result.is_anonymous is True
        assert result.status == CommentStatus.ACTIVE
        assert result.like_count == 0
        assert result.reply_count == 0

        saved = await comment_repo.find_by_id(result.id)
        assert saved == result

    @pytest.mark.asyncio
    async def test_reply_depth_is_parent_depth_plus_one(self, unit_env):
        """Reply depth should be derived from the parent."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(make_post())

        root = await comment_repo.save(make_comment(post.id))
        child = await comment_repo.save(make_comment(post.id, parent=root))

        # Act
        result = await comment_service.create_comment(
            post_id=post.id,
            author_id=UserId(uuid4()),
            content="Reply",
            parent_id=child.id,
        )

        # Assert
        assert result.depth == 2
        assert result.parent_id == child.id

    @pytest.mark.asyncio
    async def test_reply_to_depth_three_rejected(self, unit_env):
        """Replying below the maximum depth should fail without writing."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(make_post())

        parent = await comment_repo.save(make_comment(post.id))
        for _ in range(3):
            parent = await comment_repo.save(make_comment(post.id, parent=parent))
        assert parent.depth == 3

        # Act & Assert
        with pytest.raises(MaxDepthExceededError):
            await comment_service.create_comment(
                post_id=post.id,
                author_id=UserId(uuid4()),
                content="Too deep",
                parent_id=parent.id,
            )
        assert await comment_repo.find_children(parent.id, include_inactive=True) == []

    @pytest.mark.asyncio
    async def test_missing_post_raises(self, unit_env):
        """Commenting on an unknown post should raise PostNotFoundError."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(PostNotFoundError):
            await comment_service.create_comment(
                post_id=PostId(uuid4()), author_id=UserId(uuid4()), content="Hello"
            )

    @pytest.mark.asyncio
    async def test_closed_post_raises(self, unit_env):
        """Commenting on a closed post should raise PostNotActiveError."""
        comment_service = await unit_env.get(CommentService)
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(make_post(status=PostStatus.CLOSED))

        with pytest.raises(PostNotActiveError):
            await comment_service.create_comment(
                post_id=post.id, author_id=UserId(uuid4()), content="Hello"
            )

    @pytest.mark.asyncio
    async def test_missing_parent_raises(self, unit_env):
        """Replying to an unknown comment should raise ParentCommentNotFoundError."""
        comment_service = await unit_env.get(CommentService)
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(make_post())

        with pytest.raises(ParentCommentNotFoundError):
            await comment_service.create_comment(
                post_id=post.id,
                author_id=UserId(uuid4()),
                content="Hello",
                parent_id=CommentId(uuid4()),
            )

    @pytest.mark.asyncio
    async def test_parent_on_other_post_raises(self, unit_env):
        """A parent from a different post is treated as missing."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(make_post())
        other = await post_service.save_post(make_post())
        parent = await comment_repo.save(make_comment(other.id))

        with pytest.raises(ParentCommentNotFoundError):
            await comment_service.create_comment(
                post_id=post.id,
                author_id=UserId(uuid4()),
                content="Hello",
                parent_id=parent.id,
            )

    @pytest.mark.asyncio
    async def test_deleted_parent_raises(self, unit_env):
        """Replying to a deleted comment should raise ParentCommentNotActiveError."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(make_post())
        parent = await comment_repo.save(
            make_comment(post.id, status=CommentStatus.DELETED)
        )

        with pytest.raises(ParentCommentNotActiveError):
            await comment_service.create_comment(
                post_id=post.id,
                author_id=UserId(uuid4()),
                content="Hello",
                parent_id=parent.id,
            )

    @pytest.mark.parametrize("content", ["", "   ", "x" * 1001])
    @pytest.mark.asyncio
    async def test_invalid_content_raises(self, unit_env, content):
        """Empty, blank or overlong content should be rejected."""
        comment_service = await unit_env.get(CommentService)
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(make_post())

        with pytest.raises(ValidationError):
            await comment_service.create_comment(
                post_id=post.id, author_id=UserId(uuid4()), content=content
            )


class TestStatusAndCounts:
    """Tests for status changes and reply recounts."""

    @pytest.mark.asyncio
    async def test_set_status_requires_expected_status(self, unit_env):
        """A second transition from ACTIVE should find nothing to change."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(PostId(uuid4())))

        first = await comment_service.set_status(comment.id, CommentStatus.DELETED)
        second = await comment_service.set_status(comment.id, CommentStatus.REPORTED)

        assert first.status == CommentStatus.DELETED
        assert second is None
        stored = await comment_repo.find_by_id(comment.id)
        assert stored.status == CommentStatus.DELETED

    @pytest.mark.asyncio
    async def test_recount_replies_counts_active_children(self, unit_env):
        """Reply count should equal the number of active children."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        parent = await comment_repo.save(make_comment(post_id))
        await comment_repo.save(make_comment(post_id, parent=parent))
        await comment_repo.save(make_comment(post_id, parent=parent))
        await comment_repo.save(
            make_comment(post_id, parent=parent, status=CommentStatus.REPORTED)
        )

        result = await comment_service.recount_replies(parent.id)

        assert result.reply_count == 2

    @pytest.mark.asyncio
    async def test_get_comment_missing_raises(self, unit_env):
        """get_comment should raise NotFoundError for unknown IDs."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.get_comment(CommentId(uuid4()))


class TestUpdateContent:
    """Tests for update_content method."""

    @pytest.mark.asyncio
    async def test_update_records_previous_content(self, unit_env):
        """Edit history should keep the replaced content."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(
            make_comment(PostId(uuid4()), content="Original")
        )

        result = await comment_service.update_content(comment.id, " Revised ")

        assert result.content == "Revised"
        assert result.is_edited is True
        assert result.last_edited_at is not None
        assert len(result.edit_history) == 1
        assert result.edit_history[0].previous_content == "Original"
        assert result.edit_history[0].reason == "Content edited"

    @pytest.mark.asyncio
    async def test_update_inactive_returns_none(self, unit_env):
        """Inactive comments should not be edited."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(
            make_comment(PostId(uuid4()), status=CommentStatus.DELETED)
        )

        assert await comment_service.update_content(comment.id, "New") is None

    @pytest.mark.asyncio
    async def test_update_missing_returns_none(self, unit_env):
        """Unknown comments return None."""
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.update_content(CommentId(uuid4()), "New") is None
