"""PostgreSQL implementation of Author repository."""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.repository import AuthorRepository
from agora.domain.value import OrganizationId, UserId
from agora.persistence.tables import authors_table


class PostgresAuthorRepository(AuthorRepository):
    """PostgreSQL implementation of AuthorRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_organization(self, author_id: UserId) -> Optional[OrganizationId]:
        """Find the organization an author belongs to."""
        stmt = select(authors_table.c.organization_id).where(
            authors_table.c.id == author_id
        )
        result = await self.session.execute(stmt)
        organization_id = result.scalar_one_or_none()
        if organization_id is None:
            return None
        return OrganizationId(
            UUID(organization_id)
            if isinstance(organization_id, str)
            else organization_id
        )
