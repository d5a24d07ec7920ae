"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from agora.domain.model import Comment, Commentable, CommentVote
from agora.domain.value import (
    Alignment,
    CommentableRef,
    CommentId,
    CommentVoteId,
    OrganizationId,
    UserId,
    VoteWeight,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        commentable=CommentableRef(
            type=row["commentable_type"], id=_uuid(row["commentable_id"])
        ),
        organization_id=OrganizationId(_uuid(row["organization_id"])),
        body=row["body"],
        depth=row["depth"],
        alignment=Alignment(row["alignment"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": comment.id,
        "author_id": comment.author_id,
        "commentable_type": comment.commentable.type,
        "commentable_id": comment.commentable.id,
        "organization_id": comment.organization_id,
        "body": comment.body,
        "depth": comment.depth,
        "alignment": int(comment.alignment),
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }


def row_to_vote(row: Dict[str, Any]) -> CommentVote:
    """Convert database row to CommentVote domain model.

    Args:
        row: Database row as dict

    Returns:
        CommentVote domain model
    """
    return CommentVote(
        id=CommentVoteId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        weight=VoteWeight(row["weight"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: CommentVote) -> Dict[str, Any]:
    """Convert CommentVote domain model to database dict."""
    return {
        "id": vote.id,
        "comment_id": vote.comment_id,
        "author_id": vote.author_id,
        "weight": int(vote.weight),
        "created_at": vote.created_at,
    }


def row_to_root_commentable(row: Dict[str, Any]) -> Commentable:
    """Convert a commentables registry row to a root Commentable (no depth)."""
    return Commentable(
        ref=CommentableRef(
            type=row["resource_type"], id=_uuid(row["resource_id"])
        ),
        organization_id=OrganizationId(_uuid(row["organization_id"])),
        depth=None,
    )
