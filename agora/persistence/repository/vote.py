"""PostgreSQL implementation of CommentVote repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import CommentVote
from agora.domain.repository import CommentVoteRepository
from agora.domain.value import CommentId, UserId, VoteWeight
from agora.persistence.mappers import row_to_vote, vote_to_dict
from agora.persistence.tables import comment_votes_table


class PostgresCommentVoteRepository(CommentVoteRepository):
    """PostgreSQL implementation of CommentVoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_comment(self, comment_id: CommentId) -> List[CommentVote]:
        """Find all votes on a comment."""
        stmt = select(comment_votes_table).where(
            comment_votes_table.c.comment_id == comment_id
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_comment_and_author(
        self, comment_id: CommentId, author_id: UserId
    ) -> Optional[CommentVote]:
        """Find a user's vote on a comment."""
        stmt = select(comment_votes_table).where(
            and_(
                comment_votes_table.c.comment_id == comment_id,
                comment_votes_table.c.author_id == author_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def count_by_weight(self, comment_id: CommentId, weight: VoteWeight) -> int:
        """Count votes of a given weight on a comment."""
        stmt = (
            select(func.count())
            .select_from(comment_votes_table)
            .where(
                and_(
                    comment_votes_table.c.comment_id == comment_id,
                    comment_votes_table.c.weight == int(weight),
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, vote: CommentVote) -> CommentVote:
        """Save a vote (create).

        The unique_comment_vote constraint raises IntegrityError on flush
        when the author already voted on the comment. The insert runs in a
        savepoint so the surrounding transaction stays usable afterwards.
        """
        stmt = insert(comment_votes_table).values(**vote_to_dict(vote))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return vote

    async def delete_by_comment_and_author(
        self, comment_id: CommentId, author_id: UserId
    ) -> bool:
        """Delete a user's vote on a comment."""
        stmt = delete(comment_votes_table).where(
            and_(
                comment_votes_table.c.comment_id == comment_id,
                comment_votes_table.c.author_id == author_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_comment(self, comment_id: CommentId) -> int:
        """Delete every vote on a comment."""
        stmt = delete(comment_votes_table).where(
            comment_votes_table.c.comment_id == comment_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
