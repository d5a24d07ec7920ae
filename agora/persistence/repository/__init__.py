"""PostgreSQL repository implementations."""

from agora.persistence.repository.author import PostgresAuthorRepository
from agora.persistence.repository.comment import PostgresCommentRepository
from agora.persistence.repository.commentable import PostgresCommentableRepository
from agora.persistence.repository.vote import PostgresCommentVoteRepository

__all__ = [
    "PostgresAuthorRepository",
    "PostgresCommentRepository",
    "PostgresCommentableRepository",
    "PostgresCommentVoteRepository",
]
