"""In-memory repository implementations for testing."""

from .author import InMemoryAuthorRepository
from .comment import InMemoryCommentRepository
from .commentable import InMemoryCommentableRepository
from .vote import InMemoryCommentVoteRepository

__all__ = [
    "InMemoryAuthorRepository",
    "InMemoryCommentRepository",
    "InMemoryCommentableRepository",
    "InMemoryCommentVoteRepository",
]
