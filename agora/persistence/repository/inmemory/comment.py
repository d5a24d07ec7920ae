"""In-memory comment repository for testing."""

from typing import Optional

from agora.domain.model.comment import Comment
from agora.domain.repository.comment import CommentRepository
from agora.domain.value import CommentableRef, CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_commentable(self, commentable: CommentableRef) -> list[Comment]:
        """Find comments attached directly to a commentable, oldest first."""
        comments = [c for c in self._comments.values() if c.commentable == commentable]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def count_by_commentable(self, commentable: CommentableRef) -> int:
        """Count comments attached directly to a commentable."""
        return sum(1 for c in self._comments.values() if c.commentable == commentable)

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._comments.pop(comment_id, None) is not None
