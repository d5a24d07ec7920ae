"""In-memory author repository for testing."""

from typing import Optional

from agora.domain.repository.author import AuthorRepository
from agora.domain.value import OrganizationId, UserId


class InMemoryAuthorRepository(AuthorRepository):
    """In-memory implementation of AuthorRepository for testing."""

    def __init__(self) -> None:
        self._organizations: dict[UserId, OrganizationId] = {}

    def register(self, author_id: UserId, organization_id: OrganizationId) -> None:
        """Record the organization an author belongs to."""
        self._organizations[author_id] = organization_id

    async def find_organization(self, author_id: UserId) -> Optional[OrganizationId]:
        """Find the organization an author belongs to."""
        return self._organizations.get(author_id)
