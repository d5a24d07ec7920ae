"""In-memory commentable repository for testing."""

from typing import Optional

from agora.domain.model.commentable import Commentable
from agora.domain.repository.comment import CommentRepository
from agora.domain.repository.commentable import CommentableRepository
from agora.domain.value import CommentableRef, CommentId, OrganizationId


class InMemoryCommentableRepository(CommentableRepository):
    """In-memory implementation of CommentableRepository for testing.

    Comment references are looked up in the comment repository; root
    resources have to be registered first.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        self._comment_repository = comment_repository
        self._roots: dict[CommentableRef, Commentable] = {}

    async def register(
        self, ref: CommentableRef, organization_id: OrganizationId
    ) -> Commentable:
        """Register a root resource that accepts comments."""
        commentable = Commentable(ref=ref, organization_id=organization_id)
        self._roots[ref] = commentable
        return commentable

    async def find(self, ref: CommentableRef) -> Optional[Commentable]:
        """Resolve a commentable reference."""
        if ref.is_comment:
            comment = await self._comment_repository.find_by_id(CommentId(ref.id))
            return comment.as_commentable() if comment else None
        return self._roots.get(ref)
