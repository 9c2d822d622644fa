"""Unit tests for GetCommentsUseCase."""

import pytest

from fellowship.application.usecase.comment import (
    GetCommentsRequest,
    GetCommentsUseCase,
)
from fellowship.domain.repository import CommentRepository, PostRepository
from fellowship.domain.service import DiscussionService
from tests.conftest import make_comment, make_post, make_principal
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_threads_with_viewer_like_state(self, unit_env):
        """Threads are returned with the viewer's like state."""
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        discussion = await unit_env.get(DiscussionService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        viewer = make_principal()

        top = await discussion.post_comment(make_principal(), post.id, "Top")
        reply = await discussion.post_comment(
            make_principal(), post.id, "Reply", parent_id=top.id
        )
        await discussion.toggle_like(viewer, reply.id)

        # Act
        response = await use_case.execute(
            GetCommentsRequest(post_id=str(post.id), viewer_id=str(viewer.id))
        )

        # Assert
        assert response.total == 1
        assert response.pages == 1
        thread = response.threads[0]
        assert thread.comment.comment_id == str(top.id)
        assert thread.comment.reply_count == 1
        assert thread.comment.is_liked is False
        assert thread.replies[0].comment_id == str(reply.id)
        assert thread.replies[0].is_liked is True
        assert thread.replies[0].like_count == 1

    @pytest.mark.asyncio
    async def test_anonymous_author_hidden_from_others(self, unit_env):
        """Anonymous comments withhold the author ID from other viewers."""
        use_case = await unit_env.get(GetCommentsUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post(comment_count=1))
        comment = await comment_repo.save(make_comment(post.id, is_anonymous=True))

        as_stranger = await use_case.execute(GetCommentsRequest(post_id=str(post.id)))
        as_author = await use_case.execute(
            GetCommentsRequest(post_id=str(post.id), viewer_id=str(comment.author_id))
        )

        assert as_stranger.threads[0].comment.author_id is None
        assert as_author.threads[0].comment.author_id == str(comment.author_id)

    @pytest.mark.asyncio
    async def test_page_and_limit(self, unit_env):
        """Paging parameters are passed through."""
        use_case = await unit_env.get(GetCommentsUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post(comment_count=3))
        for _ in range(3):
            await comment_repo.save(make_comment(post.id))

        response = await use_case.execute(
            GetCommentsRequest(post_id=str(post.id), page=2, limit=2)
        )

        assert len(response.threads) == 1
        assert response.page == 2
        assert response.pages == 2
        assert response.total == 3
        assert response.post_id == str(post.id)
