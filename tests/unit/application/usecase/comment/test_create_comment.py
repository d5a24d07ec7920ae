"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest
from pydantic import ValidationError as RequestValidationError

from agora.application.usecase.comment.create_comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from agora.domain.error import DepthExceededError, NotFoundError, ValidationError
from agora.domain.repository import CommentRepository
from agora.domain.service import CommentTree
from tests.conftest import build_thread, new_organization, register_author, register_root
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """Commenting on a proposal should persist a depth 0 comment."""
        # Arrange
        comment_tree = await unit_env.get(CommentTree)
        comment_repo = await unit_env.get(CommentRepository)
        use_case = CreateCommentUseCase(comment_tree=comment_tree)

        organization_id = new_organization()
        author_id = await register_author(unit_env, organization_id)
        root = await register_root(unit_env, organization_id)

        request = CreateCommentRequest(
            author_id=str(author_id),
            commentable_type="proposal",
            commentable_id=str(root.id),
            body="Strongly agree",
            alignment=1,
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.depth == 0
        assert response.alignment == 1
        assert response.can_have_replies is True
        assert response.organization_id == str(organization_id)
        assert response.commentable_type == "proposal"
        assert response.commentable_id == str(root.id)

        saved = await comment_repo.find_by_commentable(root)
        assert len(saved) == 1
        assert str(saved[0].id) == response.comment_id

    @pytest.mark.asyncio
    async def test_reply_to_comment(self, unit_env):
        """Replying uses the 'comment' type and the parent comment ID."""
        comment_tree = await unit_env.get(CommentTree)
        use_case = CreateCommentUseCase(comment_tree=comment_tree)
        organization_id = new_organization()
        author_id = await register_author(unit_env, organization_id)
        root = await register_root(unit_env, organization_id)
        thread = await build_thread(unit_env, author_id, root, depth=1)

        response = await use_case.execute(
            CreateCommentRequest(
                author_id=str(author_id),
                commentable_type="comment",
                commentable_id=str(thread[1].id),
                body="Depth two reply",
            )
        )

        assert response.depth == 2
        assert response.alignment == 0
        assert response.commentable_type == "comment"

    @pytest.mark.asyncio
    async def test_commentable_type_is_normalized(self, unit_env):
        comment_tree = await unit_env.get(CommentTree)
        use_case = CreateCommentUseCase(comment_tree=comment_tree)
        organization_id = new_organization()
        author_id = await register_author(unit_env, organization_id)
        root = await register_root(unit_env, organization_id)

        response = await use_case.execute(
            CreateCommentRequest(
                author_id=str(author_id),
                commentable_type="  Proposal ",
                commentable_id=str(root.id),
                body="Hello",
            )
        )

        assert response.commentable_type == "proposal"

    @pytest.mark.asyncio
    async def test_reply_at_max_depth_reports_no_further_replies(self, unit_env):
        comment_tree = await unit_env.get(CommentTree)
        use_case = CreateCommentUseCase(comment_tree=comment_tree)
        organization_id = new_organization()
        author_id = await register_author(unit_env, organization_id)
        root = await register_root(unit_env, organization_id)
        thread = await build_thread(unit_env, author_id, root, depth=2)

        response = await use_case.execute(
            CreateCommentRequest(
                author_id=str(author_id),
                commentable_type="comment",
                commentable_id=str(thread[2].id),
                body="Last level",
            )
        )

        assert response.depth == 3
        assert response.can_have_replies is False

        with pytest.raises(DepthExceededError):
            await use_case.execute(
                CreateCommentRequest(
                    author_id=str(author_id),
                    commentable_type="comment",
                    commentable_id=response.comment_id,
                    body="One too many",
                )
            )

    @pytest.mark.asyncio
    async def test_invalid_alignment_is_rejected(self, unit_env):
        comment_tree = await unit_env.get(CommentTree)
        use_case = CreateCommentUseCase(comment_tree=comment_tree)
        organization_id = new_organization()
        author_id = await register_author(unit_env, organization_id)
        root = await register_root(unit_env, organization_id)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(
                    author_id=str(author_id),
                    commentable_type="proposal",
                    commentable_id=str(root.id),
                    body="Hello",
                    alignment=5,
                )
            )

    def test_boolean_alignment_is_rejected_by_request(self):
        with pytest.raises(RequestValidationError):
            CreateCommentRequest(
                author_id=str(uuid4()),
                commentable_type="proposal",
                commentable_id=str(uuid4()),
                body="Hello",
                alignment=True,
            )

    @pytest.mark.asyncio
    async def test_unknown_root_raises_not_found(self, unit_env):
        comment_tree = await unit_env.get(CommentTree)
        use_case = CreateCommentUseCase(comment_tree=comment_tree)
        author_id = await register_author(unit_env, new_organization())

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    author_id=str(author_id),
                    commentable_type="debate",
                    commentable_id=str(uuid4()),
                    body="Hello",
                )
            )
