"""Commentable capability view.

A Commentable is what the comment tree needs to know about a comment target,
whatever its concrete type: which organization it lives in and, for
comments, how deep it sits in its tree.
"""

from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import CommentableRef, OrganizationId


class Commentable(DomainModel):
    """Resolved commentable.

    Root resources (proposals, debates, ...) have no depth and always
    accept a first level of comments.
    """

    ref: CommentableRef
    organization_id: OrganizationId
    depth: Optional[int] = Field(default=None, ge=0)

    def can_have_replies(self, max_depth: int) -> bool:
        """Whether a new comment may be attached to this commentable."""
        if self.depth is None:
            return True
        return self.depth < max_depth
