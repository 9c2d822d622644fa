"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from fellowship.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from fellowship.domain.error import PostNotFoundError
from fellowship.domain.repository import PostRepository
from fellowship.domain.value import CommentStatus, Language
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """Creating a comment returns it and bumps the post count."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        author_id = str(uuid4())

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id),
                content="God bless",
                author_id=author_id,
                language=Language.TAGALOG,
            )
        )

        # Assert
        assert response.comment.post_id == str(post.id)
        assert response.comment.author_id == author_id
        assert response.comment.content == "God bless"
        assert response.comment.depth == 0
        assert response.comment.parent_id is None
        assert response.comment.language == Language.TAGALOG
        assert response.comment.status == CommentStatus.ACTIVE
        assert response.comment.is_liked is False
        assert (await post_repo.find_by_id(post.id)).comment_count == 1

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env):
        """Replies carry their parent and depth."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        parent = await use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id), content="Parent", author_id=str(uuid4())
            )
        )

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id),
                content="Child",
                author_id=str(uuid4()),
                parent_id=parent.comment.comment_id,
            )
        )

        # Assert
        assert response.comment.parent_id == parent.comment.comment_id
        assert response.comment.depth == 1

    @pytest.mark.asyncio
    async def test_anonymous_comment_visible_to_author(self, unit_env):
        """The author still sees their own ID on an anonymous comment."""
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        author_id = str(uuid4())

        response = await use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id),
                content="Please pray for my family",
                author_id=author_id,
                is_anonymous=True,
            )
        )

        assert response.comment.is_anonymous is True
        assert response.comment.author_id == author_id

    @pytest.mark.asyncio
    async def test_missing_post_raises(self, unit_env):
        """Unknown posts raise PostNotFoundError."""
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(PostNotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=str(uuid4()), content="Hello", author_id=str(uuid4())
                )
            )
