"""Unit tests for VoteCommentUseCase."""

from uuid import uuid4

import pytest

from agora.application.usecase.vote.vote_comment import (
    VoteCommentRequest,
    VoteCommentUseCase,
)
from agora.domain.error import DuplicateVoteError, NotFoundError
from agora.domain.service import CommentTree
from agora.domain.value import UserId
from tests.conftest import new_organization, register_author, register_root
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _create_comment(unit_env):
    comment_tree = await unit_env.get(CommentTree)
    organization_id = new_organization()
    author_id = await register_author(unit_env, organization_id)
    root = await register_root(unit_env, organization_id)
    return await comment_tree.create_comment(
        author_id=author_id, commentable_ref=root, body="Vote on me"
    )


class TestVoteCommentUseCase:
    """Tests for VoteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_upvote_returns_weight_and_tally(self, unit_env):
        """Upvote should store weight 1 and report the new tally."""
        # Arrange
        comment_tree = await unit_env.get(CommentTree)
        use_case = VoteCommentUseCase(comment_tree=comment_tree)
        comment = await _create_comment(unit_env)

        # Act
        response = await use_case.execute(
            VoteCommentRequest(
                comment_id=str(comment.id), user_id=str(uuid4()), direction="up"
            )
        )

        # Assert
        assert response.weight == 1
        assert response.comment_id == str(comment.id)
        assert response.up_votes == 1
        assert response.down_votes == 0

    @pytest.mark.asyncio
    async def test_downvote_stores_negative_weight(self, unit_env):
        comment_tree = await unit_env.get(CommentTree)
        use_case = VoteCommentUseCase(comment_tree=comment_tree)
        comment = await _create_comment(unit_env)
        voter_id = UserId(uuid4())

        response = await use_case.execute(
            VoteCommentRequest(
                comment_id=str(comment.id), user_id=str(voter_id), direction="down"
            )
        )

        assert response.weight == -1
        assert response.down_votes == 1
        assert await comment_tree.down_voted_by(comment, voter_id)

    @pytest.mark.asyncio
    async def test_second_vote_is_rejected(self, unit_env):
        comment_tree = await unit_env.get(CommentTree)
        use_case = VoteCommentUseCase(comment_tree=comment_tree)
        comment = await _create_comment(unit_env)
        user_id = str(uuid4())

        await use_case.execute(
            VoteCommentRequest(comment_id=str(comment.id), user_id=user_id, direction="up")
        )

        with pytest.raises(DuplicateVoteError):
            await use_case.execute(
                VoteCommentRequest(
                    comment_id=str(comment.id), user_id=user_id, direction="down"
                )
            )

        tally = await comment_tree.tally(comment.id)
        assert (tally.up, tally.down) == (1, 0)

    @pytest.mark.asyncio
    async def test_vote_on_missing_comment_raises_not_found(self, unit_env):
        comment_tree = await unit_env.get(CommentTree)
        use_case = VoteCommentUseCase(comment_tree=comment_tree)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                VoteCommentRequest(
                    comment_id=str(uuid4()), user_id=str(uuid4()), direction="up"
                )
            )
