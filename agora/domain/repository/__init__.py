"""Repository interfaces for the comment tree domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from agora.domain.repository.author import AuthorRepository
from agora.domain.repository.comment import CommentRepository
from agora.domain.repository.commentable import CommentableRepository
from agora.domain.repository.vote import CommentVoteRepository

__all__ = [
    "AuthorRepository",
    "CommentRepository",
    "CommentableRepository",
    "CommentVoteRepository",
]
