"""Application layer DI providers."""

from dishka import Scope, provide

from fellowship.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    ReportCommentUseCase,
    ToggleLikeUseCase,
    UpdateCommentUseCase,
)
from fellowship.domain.service import DiscussionService
from fellowship.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_create_comment_use_case(
        self, discussion_service: DiscussionService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(discussion_service=discussion_service)

    @provide
    def get_update_comment_use_case(
        self, discussion_service: DiscussionService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(discussion_service=discussion_service)

    @provide
    def get_delete_comment_use_case(
        self, discussion_service: DiscussionService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(discussion_service=discussion_service)

    @provide
    def get_toggle_like_use_case(
        self, discussion_service: DiscussionService
    ) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(discussion_service=discussion_service)

    @provide
    def get_report_comment_use_case(
        self, discussion_service: DiscussionService
    ) -> ReportCommentUseCase:
        """Provide report comment use case."""
        return ReportCommentUseCase(discussion_service=discussion_service)

    @provide
    def get_comments_use_case(
        self, discussion_service: DiscussionService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(discussion_service=discussion_service)
