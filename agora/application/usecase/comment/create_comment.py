"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from agora.application.usecase.base import BaseUseCase
from agora.domain.service import CommentTree
from agora.domain.value import Alignment, CommentableRef, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    author_id: str  # User ID from authenticated user
    commentable_type: str  # 'comment' for replies
    commentable_id: str  # UUID string
    body: str
    alignment: int = Field(default=Alignment.NEUTRAL, strict=True)  # no bool coercion


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    author_id: str
    commentable_type: str
    commentable_id: str
    organization_id: str
    body: str
    alignment: int
    depth: int
    can_have_replies: bool
    created_at: datetime


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a resource or replying to a comment."""

    def __init__(self, comment_tree: CommentTree) -> None:
        """Initialize create comment use case.

        Args:
            comment_tree: Comment tree domain service
        """
        self.comment_tree = comment_tree

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            Create comment response with comment details

        Raises:
            ValidationError: If body is blank or alignment out of range
            NotFoundError: If the commentable or the author does not resolve
            DepthExceededError: If the reply would exceed the max depth
            OrganizationMismatchError: If organizations differ
        """
        commentable_ref = CommentableRef(
            type=request.commentable_type, id=UUID(request.commentable_id)
        )
        comment = await self.comment_tree.create_comment(
            author_id=UserId(UUID(request.author_id)),
            commentable_ref=commentable_ref,
            body=request.body,
            alignment=request.alignment,
        )

        return CreateCommentResponse(
            comment_id=str(comment.id),
            author_id=str(comment.author_id),
            commentable_type=comment.commentable.type,
            commentable_id=str(comment.commentable.id),
            organization_id=str(comment.organization_id),
            body=comment.body,
            alignment=int(comment.alignment),
            depth=comment.depth,
            can_have_replies=self.comment_tree.can_have_replies(comment),
            created_at=comment.created_at,
        )
