"""Domain model entities for the comment tree."""

from agora.domain.model.comment import Comment
from agora.domain.model.commentable import Commentable
from agora.domain.model.vote import CommentVote

__all__ = [
    "Comment",
    "Commentable",
    "CommentVote",
]
