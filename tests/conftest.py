"""Test configuration and helpers."""

from uuid import uuid4

from dishka import AsyncContainer

from agora.domain.model import Comment
from agora.domain.repository import AuthorRepository, CommentableRepository
from agora.domain.service import CommentTree
from agora.domain.value import CommentableRef, OrganizationId, UserId


def new_organization() -> OrganizationId:
    """Fresh organization ID."""
    return OrganizationId(uuid4())


async def register_author(
    env: AsyncContainer, organization_id: OrganizationId
) -> UserId:
    """Register an author in the in-memory identity store.

    Args:
        env: Request-scoped unit test container
        organization_id: Organization the author belongs to

    Returns:
        The new author's ID
    """
    author_repo = await env.get(AuthorRepository)
    author_id = UserId(uuid4())
    author_repo.register(author_id, organization_id)
    return author_id


async def register_root(
    env: AsyncContainer,
    organization_id: OrganizationId,
    resource_type: str = "proposal",
) -> CommentableRef:
    """Register a root resource (e.g. a proposal) that accepts comments."""
    commentable_repo = await env.get(CommentableRepository)
    ref = CommentableRef(type=resource_type, id=uuid4())
    await commentable_repo.register(ref, organization_id)
    return ref


async def build_thread(
    env: AsyncContainer, author_id: UserId, root: CommentableRef, depth: int
) -> list[Comment]:
    """Create a chain of replies from depth 0 down to ``depth``.

    Returns:
        The comments, index i holding the comment at depth i
    """
    tree = await env.get(CommentTree)
    thread: list[Comment] = []
    target = root
    for level in range(depth + 1):
        comment = await tree.create_comment(
            author_id=author_id,
            commentable_ref=target,
            body=f"Comment at depth {level}",
        )
        thread.append(comment)
        target = comment.ref
    return thread
