"""Vote comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.domain.service import CommentTree
from agora.domain.value import CommentId, UserId, VoteDirection


class VoteCommentRequest(BaseModel):
    """Vote comment request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    direction: VoteDirection


class VoteCommentResponse(BaseModel):
    """Vote comment response."""

    vote_id: str
    comment_id: str
    weight: int
    up_votes: int
    down_votes: int
    created_at: datetime


class VoteCommentUseCase(BaseUseCase):
    """Use case for voting a comment up or down."""

    def __init__(self, comment_tree: CommentTree) -> None:
        """Initialize vote comment use case.

        Args:
            comment_tree: Comment tree domain service
        """
        self.comment_tree = comment_tree

    async def execute(self, request: VoteCommentRequest) -> VoteCommentResponse:
        """Execute vote flow.

        Raises:
            NotFoundError: If the comment does not exist
            DuplicateVoteError: If the user already voted on the comment
        """
        comment_id = CommentId(UUID(request.comment_id))
        vote = await self.comment_tree.vote(
            comment_id, UserId(UUID(request.user_id)), request.direction
        )
        tally = await self.comment_tree.tally(comment_id)

        return VoteCommentResponse(
            vote_id=str(vote.id),
            comment_id=str(vote.comment_id),
            weight=int(vote.weight),
            up_votes=tally.up,
            down_votes=tally.down,
            created_at=vote.created_at,
        )
