"""Domain layer DI providers."""

from dishka import Scope, provide

from fellowship.config import DiscussionSettings
from fellowship.domain.repository import CommentRepository, PostRepository
from fellowship.domain.service import (
    CommentService,
    DiscussionService,
    ModerationPolicy,
    PostService,
)
from fellowship.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_moderation_policy(
        self, discussion_settings: DiscussionSettings
    ) -> ModerationPolicy:
        """Provide moderation policy (stateless, shared)."""
        return ModerationPolicy(report_threshold=discussion_settings.report_threshold)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        discussion_settings: DiscussionSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_service=post_service,
            max_depth=discussion_settings.max_depth,
        )

    @provide
    def get_discussion_service(
        self,
        comment_service: CommentService,
        post_service: PostService,
        moderation_policy: ModerationPolicy,
        discussion_settings: DiscussionSettings,
    ) -> DiscussionService:
        """Provide discussion domain service."""
        return DiscussionService(
            comment_service=comment_service,
            post_service=post_service,
            moderation_policy=moderation_policy,
            default_page_size=discussion_settings.default_page_size,
        )
