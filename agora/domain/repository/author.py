"""Author repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.value import OrganizationId, UserId


class AuthorRepository(ABC):
    """Identity lookups needed by the comment tree."""

    @abstractmethod
    async def find_organization(self, author_id: UserId) -> Optional[OrganizationId]:
        """Find the organization an author belongs to.

        Args:
            author_id: The author's user ID

        Returns:
            The organization ID, None if the author is unknown
        """
        pass
