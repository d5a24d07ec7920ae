"""Integration tests for the PostgreSQL comment tree repositories.

These tests assume PostgreSQL is running with migrations applied
(``python scripts/run_migrations.py``). Run with ``pytest -m integration``.
"""

from uuid import uuid4

import pytest
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.error import DepthExceededError, DuplicateVoteError
from agora.domain.repository import (
    CommentableRepository,
    CommentRepository,
    CommentVoteRepository,
)
from agora.domain.service import CommentTree
from agora.domain.value import (
    Alignment,
    CommentableRef,
    OrganizationId,
    UserId,
    VoteDirection,
)
from agora.persistence.tables import authors_table, commentables_table
from tests.harness import create_env_fixture

# Integration test fixture - real persistence, assumes postgres running
integration_env = create_env_fixture(unmock={"persistence"})

pytestmark = pytest.mark.integration


async def _seed(integration_env) -> tuple[UserId, CommentableRef]:
    """Insert an author and a proposal sharing a fresh organization."""
    session = await integration_env.get(AsyncSession)
    organization_id = OrganizationId(uuid4())
    author_id = UserId(uuid4())
    root = CommentableRef(type="proposal", id=uuid4())

    await session.execute(
        insert(authors_table).values(id=author_id, organization_id=organization_id)
    )
    await session.flush()
    commentable_repo = await integration_env.get(CommentableRepository)
    await commentable_repo.register(root, organization_id)
    return author_id, root


class TestCommentTreeIntegration:
    """Comment tree against PostgreSQL."""

    @pytest.mark.asyncio
    async def test_reply_chain_resolves_through_comments_table(self, integration_env):
        """Replies resolve their parent depth from the stored comment row."""
        # Arrange
        tree = await integration_env.get(CommentTree)
        comment_repo = await integration_env.get(CommentRepository)
        commentable_repo = await integration_env.get(CommentableRepository)
        author_id, root = await _seed(integration_env)

        # Act
        top = await tree.create_comment(
            author_id=author_id,
            commentable_ref=root,
            body="Top level",
            alignment=Alignment.IN_FAVOR,
        )
        reply = await tree.create_comment(
            author_id=author_id, commentable_ref=top.ref, body="Reply"
        )

        # Assert
        stored = await comment_repo.find_by_id(reply.id)
        assert stored is not None
        assert stored.depth == 1
        assert stored.commentable == top.ref

        resolved = await commentable_repo.find(top.ref)
        assert resolved is not None
        assert resolved.depth == 0

        resolved_root = await commentable_repo.find(root)
        assert resolved_root is not None
        assert resolved_root.depth is None

    @pytest.mark.asyncio
    async def test_depth_limit_enforced(self, integration_env):
        tree = await integration_env.get(CommentTree)
        author_id, root = await _seed(integration_env)

        target = root
        for level in range(4):
            comment = await tree.create_comment(
                author_id=author_id, commentable_ref=target, body=f"Level {level}"
            )
            target = comment.ref

        with pytest.raises(DepthExceededError):
            await tree.create_comment(
                author_id=author_id, commentable_ref=target, body="Too deep"
            )

    @pytest.mark.asyncio
    async def test_duplicate_vote_keeps_session_usable(self, integration_env):
        """The unique constraint rejects a second vote without aborting the transaction."""
        tree = await integration_env.get(CommentTree)
        author_id, root = await _seed(integration_env)
        comment = await tree.create_comment(
            author_id=author_id, commentable_ref=root, body="Vote on me"
        )
        voter_id = UserId(uuid4())

        await tree.vote(comment.id, voter_id, VoteDirection.UP)
        with pytest.raises(DuplicateVoteError):
            await tree.vote(comment.id, voter_id, VoteDirection.DOWN)

        tally = await tree.tally(comment.id)
        assert (tally.up, tally.down) == (1, 0)
        assert await tree.up_voted_by(comment, voter_id)

    @pytest.mark.asyncio
    async def test_edit_and_delete(self, integration_env):
        tree = await integration_env.get(CommentTree)
        vote_repo = await integration_env.get(CommentVoteRepository)
        comment_repo = await integration_env.get(CommentRepository)
        author_id, root = await _seed(integration_env)
        comment = await tree.create_comment(
            author_id=author_id, commentable_ref=root, body="Original"
        )
        await tree.vote(comment.id, UserId(uuid4()), VoteDirection.DOWN)

        edited = await tree.edit_comment(comment.id, "Edited", Alignment.AGAINST)
        stored = await comment_repo.find_by_id(comment.id)
        assert stored is not None
        assert stored.body == "Edited"
        assert stored.alignment == Alignment.AGAINST
        assert stored.depth == edited.depth == 0

        await tree.delete_comment(comment.id)

        assert await comment_repo.find_by_id(comment.id) is None
        assert await vote_repo.find_by_comment(comment.id) == []


class TestRootResourceTags:
    """Root resources resolve whatever casing their type tag was given."""

    @pytest.mark.asyncio
    async def test_registered_mixed_case_tag_accepts_comments(self, integration_env):
        # Arrange
        tree = await integration_env.get(CommentTree)
        session = await integration_env.get(AsyncSession)
        commentable_repo = await integration_env.get(CommentableRepository)
        organization_id = OrganizationId(uuid4())
        author_id = UserId(uuid4())
        resource_id = uuid4()
        await session.execute(
            insert(authors_table).values(id=author_id, organization_id=organization_id)
        )
        await commentable_repo.register(
            CommentableRef(type="Proposal", id=resource_id), organization_id
        )

        # Act
        comment = await tree.create_comment(
            author_id=author_id,
            commentable_ref=CommentableRef(type="PROPOSAL", id=resource_id),
            body="Mixed case tag",
        )

        # Assert
        assert comment.depth == 0
        assert comment.commentable.type == "proposal"

    @pytest.mark.asyncio
    async def test_row_inserted_with_raw_tag_resolves(self, integration_env):
        """Rows written by the platform keep their own casing."""
        tree = await integration_env.get(CommentTree)
        session = await integration_env.get(AsyncSession)
        organization_id = OrganizationId(uuid4())
        author_id = UserId(uuid4())
        resource_id = uuid4()
        await session.execute(
            insert(authors_table).values(id=author_id, organization_id=organization_id)
        )
        await session.execute(
            insert(commentables_table).values(
                resource_type="Decidim::Proposals::Proposal",
                resource_id=resource_id,
                organization_id=organization_id,
            )
        )
        await session.flush()

        comment = await tree.create_comment(
            author_id=author_id,
            commentable_ref=CommentableRef(
                type="Decidim::Proposals::Proposal", id=resource_id
            ),
            body="Platform tag",
        )

        assert comment.organization_id == organization_id
        assert comment.commentable.type == "decidim::proposals::proposal"
