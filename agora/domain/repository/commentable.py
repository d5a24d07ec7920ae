"""Commentable repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.commentable import Commentable
from agora.domain.value import CommentableRef, OrganizationId


class CommentableRepository(ABC):
    """Resolves commentable references.

    Comment references resolve to the comment's organization and depth.
    Any other reference resolves to a root resource without depth.
    """

    @abstractmethod
    async def find(self, ref: CommentableRef) -> Optional[Commentable]:
        """Resolve a commentable reference.

        Args:
            ref: Type tag and id of the commentable

        Returns:
            The resolved commentable, None if the reference does not resolve
        """
        pass

    @abstractmethod
    async def register(
        self, ref: CommentableRef, organization_id: OrganizationId
    ) -> Commentable:
        """Register a root resource that accepts comments.

        The stored type tag is the normalized ``ref.type``, so later
        lookups with any casing of the same tag resolve.

        Args:
            ref: Type tag and id of the root resource
            organization_id: Organization the resource belongs to

        Returns:
            The registered root commentable
        """
        pass
