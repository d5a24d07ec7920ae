"""Comment entity.

Comments are threaded discussions attached to any commentable resource.
A reply is a comment whose commentable is another comment, so the tree is
built from polymorphic references rather than a dedicated parent column.
"""

from datetime import datetime

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.model.commentable import Commentable
from agora.domain.value import (
    Alignment,
    CommentableRef,
    CommentId,
    OrganizationId,
    UserId,
)


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - commentable: the root resource, or the parent comment for replies
    - depth: nesting level (0 on a root resource, parent depth + 1 for replies)

    author_id, commentable, depth and organization_id never change after
    creation; body and alignment may be edited.
    """

    id: CommentId
    author_id: UserId
    commentable: CommentableRef
    organization_id: OrganizationId
    body: str = Field(min_length=1)
    depth: int = Field(default=0, ge=0)
    alignment: Alignment = Alignment.NEUTRAL
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def ref(self) -> CommentableRef:
        """Reference used when replying to this comment."""
        return CommentableRef.for_comment(self.id)

    @property
    def is_reply(self) -> bool:
        return self.commentable.is_comment

    def as_commentable(self) -> Commentable:
        """View this comment as a reply target."""
        return Commentable(
            ref=self.ref,
            organization_id=self.organization_id,
            depth=self.depth,
        )
