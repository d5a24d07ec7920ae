"""Get comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.domain.service import CommentTree
from agora.domain.value import CommentId, UserId


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str  # UUID string
    viewer_id: str | None = None  # Optional authenticated user for vote state


class GetCommentResponse(BaseModel):
    """Comment with its vote state."""

    comment_id: str
    author_id: str
    commentable_type: str
    commentable_id: str
    body: str
    alignment: int
    depth: int
    can_have_replies: bool
    up_votes: int
    down_votes: int
    score: int
    up_voted: bool
    down_voted: bool
    reply_count: int
    created_at: datetime
    updated_at: datetime


class GetCommentUseCase(BaseUseCase):
    """Use case for reading a comment with its tally and the viewer's votes."""

    def __init__(self, comment_tree: CommentTree) -> None:
        """Initialize get comment use case.

        Args:
            comment_tree: Comment tree domain service
        """
        self.comment_tree = comment_tree

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        """Execute get comment flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.comment_tree.get_comment(
            CommentId(UUID(request.comment_id))
        )
        tally = await self.comment_tree.tally(comment.id)
        replies = await self.comment_tree.get_replies(comment.ref)

        up_voted = down_voted = False
        if request.viewer_id:
            viewer_id = UserId(UUID(request.viewer_id))
            up_voted = await self.comment_tree.up_voted_by(comment, viewer_id)
            down_voted = await self.comment_tree.down_voted_by(comment, viewer_id)

        return GetCommentResponse(
            comment_id=str(comment.id),
            author_id=str(comment.author_id),
            commentable_type=comment.commentable.type,
            commentable_id=str(comment.commentable.id),
            body=comment.body,
            alignment=int(comment.alignment),
            depth=comment.depth,
            can_have_replies=self.comment_tree.can_have_replies(comment),
            up_votes=tally.up,
            down_votes=tally.down,
            score=tally.score,
            up_voted=up_voted,
            down_voted=down_voted,
            reply_count=len(replies),
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
