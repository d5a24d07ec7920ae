"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Comment
from agora.domain.repository import CommentRepository
from agora.domain.value import CommentableRef, CommentId
from agora.persistence.mappers import comment_to_dict, row_to_comment
from agora.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    def _commentable_clause(self, commentable: CommentableRef):
        return and_(
            comments_table.c.commentable_type == commentable.type,
            comments_table.c.commentable_id == commentable.id,
        )

    async def find_by_commentable(self, commentable: CommentableRef) -> List[Comment]:
        """Find comments attached directly to a commentable, oldest first."""
        stmt = (
            select(comments_table)
            .where(self._commentable_clause(commentable))
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_commentable(self, commentable: CommentableRef) -> int:
        """Count comments attached directly to a commentable."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(self._commentable_clause(commentable))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id)
        comment_dict = comment_to_dict(comment)

        if existing:
            # Structural fields are immutable; only editable columns are written
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment.id)
                .values(
                    body=comment_dict["body"],
                    alignment=comment_dict["alignment"],
                    updated_at=comment_dict["updated_at"],
                )
            )
        else:
            stmt = insert(comments_table).values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
