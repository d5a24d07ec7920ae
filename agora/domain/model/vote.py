"""Comment vote entity.

Users curate comments by voting them up or down.
Each user can cast one vote per comment.
"""

from datetime import datetime

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import CommentId, CommentVoteId, UserId, VoteWeight


class CommentVote(DomainModel):
    """Comment vote entity.

    Business rules:
    - One vote per user per comment (enforced by a unique constraint)
    - Weight is +1 (up) or -1 (down)
    - Votes have no lifecycle of their own: they go away with their comment
    """

    id: CommentVoteId
    comment_id: CommentId
    author_id: UserId
    weight: VoteWeight
    created_at: datetime = Field(default_factory=datetime.now)
