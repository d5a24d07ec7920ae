"""In-memory comment vote repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from agora.domain.model.vote import CommentVote
from agora.domain.repository.vote import CommentVoteRepository
from agora.domain.value import CommentId, UserId, VoteWeight


class InMemoryCommentVoteRepository(CommentVoteRepository):
    """In-memory implementation of CommentVoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[CommentVote] = []

    async def find_by_comment(self, comment_id: CommentId) -> list[CommentVote]:
        """Find all votes on a comment."""
        return [v for v in self._votes if v.comment_id == comment_id]

    async def find_by_comment_and_author(
        self, comment_id: CommentId, author_id: UserId
    ) -> Optional[CommentVote]:
        """Find a user's vote on a comment."""
        for vote in self._votes:
            if vote.comment_id == comment_id and vote.author_id == author_id:
                return vote
        return None

    async def count_by_weight(self, comment_id: CommentId, weight: VoteWeight) -> int:
        """Count votes of a given weight on a comment."""
        return sum(
            1 for v in self._votes if v.comment_id == comment_id and v.weight == weight
        )

    async def save(self, vote: CommentVote) -> CommentVote:
        """Save a vote.

        Raises:
            IntegrityError: If the author already voted on the comment
        """
        existing = await self.find_by_comment_and_author(
            vote.comment_id, vote.author_id
        )
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def delete_by_comment_and_author(
        self, comment_id: CommentId, author_id: UserId
    ) -> bool:
        """Delete a user's vote on a comment."""
        for i, vote in enumerate(self._votes):
            if vote.comment_id == comment_id and vote.author_id == author_id:
                self._votes.pop(i)
                return True
        return False

    async def delete_by_comment(self, comment_id: CommentId) -> int:
        """Delete every vote on a comment."""
        remaining = [v for v in self._votes if v.comment_id != comment_id]
        deleted = len(self._votes) - len(remaining)
        self._votes = remaining
        return deleted
