"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from agora.domain.model.comment import Comment
from agora.domain.value import CommentableRef, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_commentable(self, commentable: CommentableRef) -> List[Comment]:
        """Find the comments attached directly to a commentable.

        For a comment reference this returns its direct replies.

        Args:
            commentable: Reference to the root resource or parent comment

        Returns:
            Comments in creation order
        """
        pass

    @abstractmethod
    async def count_by_commentable(self, commentable: CommentableRef) -> int:
        """Count the comments attached directly to a commentable."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment.

        Votes are not touched here; callers delete them in the same
        unit of work before deleting the comment.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a comment was deleted, False if none existed
        """
        pass
