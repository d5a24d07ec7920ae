"""Remove comment use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.domain.service import CommentTree
from agora.domain.value import CommentId


class RemoveCommentRequest(BaseModel):
    """Remove comment request."""

    comment_id: str  # UUID string


class RemoveCommentResponse(BaseModel):
    """Remove comment response."""

    comment_id: str
    removed: bool


class RemoveCommentUseCase(BaseUseCase):
    """Use case for deleting a comment and its votes."""

    def __init__(self, comment_tree: CommentTree) -> None:
        self.comment_tree = comment_tree

    async def execute(self, request: RemoveCommentRequest) -> RemoveCommentResponse:
        """Execute remove comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            BusinessRuleViolationError: If the comment still has replies
        """
        await self.comment_tree.delete_comment(CommentId(UUID(request.comment_id)))
        return RemoveCommentResponse(comment_id=request.comment_id, removed=True)
