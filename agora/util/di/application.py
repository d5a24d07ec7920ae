"""Application layer DI providers."""

from dishka import Scope, provide

from agora.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentUseCase,
    RemoveCommentUseCase,
)
from agora.application.usecase.vote import VoteCommentUseCase
from agora.domain.service import CommentTree
from agora.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_tree: CommentTree
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_tree=comment_tree)

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(self, comment_tree: CommentTree) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(comment_tree=comment_tree)

    @provide(scope=Scope.REQUEST)
    def get_remove_comment_use_case(
        self, comment_tree: CommentTree
    ) -> RemoveCommentUseCase:
        """Provide remove comment use case."""
        return RemoveCommentUseCase(comment_tree=comment_tree)

    @provide(scope=Scope.REQUEST)
    def get_vote_comment_use_case(
        self, comment_tree: CommentTree
    ) -> VoteCommentUseCase:
        """Provide vote comment use case."""
        return VoteCommentUseCase(comment_tree=comment_tree)
