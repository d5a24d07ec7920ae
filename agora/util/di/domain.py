"""Domain layer DI providers."""

from dishka import Scope, provide

from agora.config import CommentSettings
from agora.domain.repository import (
    AuthorRepository,
    CommentableRepository,
    CommentRepository,
    CommentVoteRepository,
)
from agora.domain.service import CommentTree
from agora.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_tree(
        self,
        comment_repository: CommentRepository,
        vote_repository: CommentVoteRepository,
        commentable_repository: CommentableRepository,
        author_repository: AuthorRepository,
        comment_settings: CommentSettings,
    ) -> CommentTree:
        """Provide comment tree domain service."""
        return CommentTree(
            comment_repository=comment_repository,
            vote_repository=vote_repository,
            commentable_repository=commentable_repository,
            author_repository=author_repository,
            max_depth=comment_settings.max_depth,
        )
