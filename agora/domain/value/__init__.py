"""Domain value objects for the comment tree."""

from agora.domain.value.identifiers import (
    CommentId,
    CommentVoteId,
    OrganizationId,
    UserId,
)
from agora.domain.value.types import (
    COMMENT_TYPE,
    Alignment,
    CommentableRef,
    VoteDirection,
    VoteTally,
    VoteWeight,
)

__all__ = [
    # Identifiers
    "UserId",
    "OrganizationId",
    "CommentId",
    "CommentVoteId",
    # Types
    "COMMENT_TYPE",
    "Alignment",
    "CommentableRef",
    "VoteDirection",
    "VoteTally",
    "VoteWeight",
]
