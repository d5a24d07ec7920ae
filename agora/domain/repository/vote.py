"""Comment vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from agora.domain.model.vote import CommentVote
from agora.domain.value import CommentId, UserId, VoteWeight


class CommentVoteRepository(ABC):
    """Repository for CommentVote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_comment(self, comment_id: CommentId) -> List[CommentVote]:
        """Find all votes on a comment.

        Args:
            comment_id: The comment ID

        Returns:
            List of votes on the comment
        """
        pass

    @abstractmethod
    async def find_by_comment_and_author(
        self, comment_id: CommentId, author_id: UserId
    ) -> Optional[CommentVote]:
        """Find a user's vote on a comment.

        Args:
            comment_id: The comment ID
            author_id: The voter's user ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def count_by_weight(self, comment_id: CommentId, weight: VoteWeight) -> int:
        """Count votes of a given weight on a comment.

        Args:
            comment_id: The comment ID
            weight: VoteWeight.UP or VoteWeight.DOWN

        Returns:
            Number of matching votes
        """
        pass

    @abstractmethod
    async def save(self, vote: CommentVote) -> CommentVote:
        """Save a vote (create).

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the author already voted on the comment
        """
        pass

    @abstractmethod
    async def delete_by_comment_and_author(
        self, comment_id: CommentId, author_id: UserId
    ) -> bool:
        """Delete a user's vote on a comment.

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def delete_by_comment(self, comment_id: CommentId) -> int:
        """Delete every vote on a comment.

        Returns:
            Number of deleted votes
        """
        pass
