"""PostgreSQL implementation of Commentable repository."""

from typing import Optional

from sqlalchemy import and_, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Commentable
from agora.domain.repository import CommentableRepository
from agora.domain.value import CommentableRef, OrganizationId
from agora.persistence.mappers import row_to_comment, row_to_root_commentable
from agora.persistence.tables import comments_table, commentables_table


class PostgresCommentableRepository(CommentableRepository):
    """Resolves comments from the comments table and root resources
    from the commentables registry."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(self, ref: CommentableRef) -> Optional[Commentable]:
        """Resolve a commentable reference."""
        if ref.is_comment:
            stmt = select(comments_table).where(comments_table.c.id == ref.id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_comment(row._asdict()).as_commentable() if row else None

        # Rows written outside register() may carry the platform's own casing
        stmt = select(commentables_table).where(
            and_(
                commentables_table.c.resource_id == ref.id,
                func.lower(func.trim(commentables_table.c.resource_type)) == ref.type,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_root_commentable(row._asdict()) if row else None

    async def register(
        self, ref: CommentableRef, organization_id: OrganizationId
    ) -> Commentable:
        """Register a root resource under its normalized type tag."""
        stmt = insert(commentables_table).values(
            resource_type=ref.type,
            resource_id=ref.id,
            organization_id=organization_id,
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return Commentable(ref=ref, organization_id=organization_id)
