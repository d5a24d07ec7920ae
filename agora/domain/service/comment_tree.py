"""Comment tree domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from agora.domain.error import (
    BusinessRuleViolationError,
    DepthExceededError,
    DuplicateVoteError,
    NotFoundError,
    OrganizationMismatchError,
    ValidationError,
)
from agora.domain.model import Comment, CommentVote
from agora.domain.repository import (
    AuthorRepository,
    CommentableRepository,
    CommentRepository,
    CommentVoteRepository,
)
from agora.domain.value import (
    Alignment,
    CommentableRef,
    CommentId,
    CommentVoteId,
    UserId,
    VoteDirection,
    VoteTally,
    VoteWeight,
)

from .base import Service

DEFAULT_MAX_DEPTH = 3


class CommentTree(Service):
    """Domain service owning comments, their bounded-depth tree and votes."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        vote_repository: CommentVoteRepository,
        commentable_repository: CommentableRepository,
        author_repository: AuthorRepository,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        """Initialize comment tree.

        Args:
            comment_repository: Comment repository
            vote_repository: Comment vote repository
            commentable_repository: Resolves commentable references
            author_repository: Resolves author organizations
            max_depth: Deepest allowed comment depth
        """
        if max_depth < 0:
            raise ValueError("max_depth must be non-negative")
        self.comment_repository = comment_repository
        self.vote_repository = vote_repository
        self.commentable_repository = commentable_repository
        self.author_repository = author_repository
        self.max_depth = max_depth

    async def create_comment(
        self,
        author_id: UserId,
        commentable_ref: CommentableRef,
        body: str,
        alignment: int = Alignment.NEUTRAL,
    ) -> Comment:
        """Create a comment on a resource or a reply to another comment.

        Args:
            author_id: Author user ID
            commentable_ref: Root resource or parent comment reference
            body: Comment text
            alignment: -1 (against), 0 (neutral) or 1 (in favor)

        Returns:
            Created comment with its computed depth

        Raises:
            ValidationError: If body is blank or alignment out of range
            NotFoundError: If the commentable or the author does not resolve
            DepthExceededError: If the commentable cannot have replies
            OrganizationMismatchError: If author and commentable organizations differ
        """
        with logfire.span(
            "comment_tree.create_comment",
            author_id=str(author_id),
            commentable=str(commentable_ref),
        ):
            body = self._validate_body(body)
            alignment = self._validate_alignment(alignment)

            commentable = await self.commentable_repository.find(commentable_ref)
            if commentable is None:
                logfire.warn("Commentable not found", commentable=str(commentable_ref))
                raise NotFoundError("commentable", str(commentable_ref))

            author_organization = await self.author_repository.find_organization(
                author_id
            )
            if author_organization is None:
                logfire.warn("Author not found", author_id=str(author_id))
                raise NotFoundError("author", str(author_id))

            if not commentable.can_have_replies(self.max_depth):
                logfire.warn(
                    "Comment tree depth exceeded",
                    commentable=str(commentable_ref),
                    depth=commentable.depth,
                    max_depth=self.max_depth,
                )
                raise DepthExceededError(commentable.depth or 0, self.max_depth)

            if author_organization != commentable.organization_id:
                logfire.warn(
                    "Organization mismatch",
                    author_id=str(author_id),
                    author_organization=str(author_organization),
                    commentable_organization=str(commentable.organization_id),
                )
                raise OrganizationMismatchError(
                    str(author_organization), str(commentable.organization_id)
                )

            depth = 0 if commentable.depth is None else commentable.depth + 1

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                author_id=author_id,
                commentable=commentable_ref,
                organization_id=commentable.organization_id,
                body=body,
                depth=depth,
                alignment=alignment,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                commentable=str(commentable_ref),
                depth=depth,
            )
            return saved

    def can_have_replies(self, comment: Comment) -> bool:
        """Whether a comment can still be replied to."""
        return comment.depth < self.max_depth

    async def has_voted(
        self, comment: Comment, author_id: UserId, direction: VoteDirection
    ) -> bool:
        """Check if a user voted a comment in the given direction.

        Args:
            comment: The comment
            author_id: The voter's user ID
            direction: VoteDirection.UP or VoteDirection.DOWN

        Returns:
            True if the user has a vote with the matching weight

        Raises:
            ValidationError: If direction is not "up" or "down"
        """
        weight = self._validate_direction(direction).weight
        vote = await self.vote_repository.find_by_comment_and_author(
            comment.id, author_id
        )
        return vote is not None and vote.weight == weight

    async def up_voted_by(self, comment: Comment, author_id: UserId) -> bool:
        return await self.has_voted(comment, author_id, VoteDirection.UP)

    async def down_voted_by(self, comment: Comment, author_id: UserId) -> bool:
        return await self.has_voted(comment, author_id, VoteDirection.DOWN)

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_tree.get_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("comment", str(comment_id))
            return comment

    async def get_replies(self, commentable_ref: CommentableRef) -> list[Comment]:
        """Get the comments attached directly to a commentable, oldest first."""
        with logfire.span(
            "comment_tree.get_replies", commentable=str(commentable_ref)
        ):
            comments = await self.comment_repository.find_by_commentable(
                commentable_ref
            )
            logfire.info(
                "Replies retrieved",
                commentable=str(commentable_ref),
                count=len(comments),
            )
            return comments

    async def vote(
        self, comment_id: CommentId, author_id: UserId, direction: VoteDirection
    ) -> CommentVote:
        """Vote a comment up or down.

        A user gets a single vote per comment; a second vote is rejected
        whatever its direction.

        Raises:
            ValidationError: If direction is not "up" or "down"
            NotFoundError: If the comment does not exist
            DuplicateVoteError: If the user already voted on the comment
        """
        direction = self._validate_direction(direction)
        with logfire.span(
            "comment_tree.vote",
            comment_id=str(comment_id),
            author_id=str(author_id),
            direction=direction.value,
        ):
            comment = await self.get_comment(comment_id)

            vote = CommentVote(
                id=CommentVoteId(uuid4()),
                comment_id=comment.id,
                author_id=author_id,
                weight=direction.weight,
                created_at=datetime.now(),
            )

            try:
                saved = await self.vote_repository.save(vote)
            except IntegrityError:
                logfire.warn(
                    "Duplicate vote attempt",
                    comment_id=str(comment_id),
                    author_id=str(author_id),
                )
                raise DuplicateVoteError(str(comment_id), str(author_id))

            logfire.info(
                "Comment voted",
                comment_id=str(comment_id),
                weight=int(saved.weight),
            )
            return saved

    async def remove_vote(self, comment_id: CommentId, author_id: UserId) -> bool:
        """Remove a user's vote from a comment.

        Returns:
            True if a vote was removed, False if none existed
        """
        with logfire.span(
            "comment_tree.remove_vote",
            comment_id=str(comment_id),
            author_id=str(author_id),
        ):
            deleted = await self.vote_repository.delete_by_comment_and_author(
                comment_id, author_id
            )
            logfire.info(
                "Vote removed" if deleted else "No vote to remove",
                comment_id=str(comment_id),
                author_id=str(author_id),
            )
            return deleted

    async def tally(self, comment_id: CommentId) -> VoteTally:
        """Count up and down votes of a comment."""
        up = await self.vote_repository.count_by_weight(comment_id, VoteWeight.UP)
        down = await self.vote_repository.count_by_weight(comment_id, VoteWeight.DOWN)
        return VoteTally(up=up, down=down)

    async def edit_comment(
        self,
        comment_id: CommentId,
        body: str,
        alignment: int = Alignment.NEUTRAL,
    ) -> Comment:
        """Edit the body and alignment of a comment.

        Author, commentable and depth are left untouched.

        Raises:
            ValidationError: If body is blank or alignment out of range
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_tree.edit_comment", comment_id=str(comment_id)):
            body = self._validate_body(body)
            alignment = self._validate_alignment(alignment)

            comment = await self.get_comment(comment_id)
            updated = comment.model_copy(
                update={
                    "body": body,
                    "alignment": alignment,
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.comment_repository.save(updated)
            logfire.info(
                "Comment edited",
                comment_id=str(comment_id),
                body_length=len(body),
            )
            return saved

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment together with its votes.

        Raises:
            NotFoundError: If the comment does not exist
            BusinessRuleViolationError: If the comment still has replies
        """
        with logfire.span("comment_tree.delete_comment", comment_id=str(comment_id)):
            comment = await self.get_comment(comment_id)

            replies = await self.comment_repository.count_by_commentable(comment.ref)
            if replies:
                logfire.warn(
                    "Cannot delete comment with replies",
                    comment_id=str(comment_id),
                    replies=replies,
                )
                raise BusinessRuleViolationError(
                    f"Comment {comment_id} has {replies} replies"
                )

            deleted_votes = await self.vote_repository.delete_by_comment(comment.id)
            await self.comment_repository.delete(comment.id)
            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                deleted_votes=deleted_votes,
            )

    @staticmethod
    def _validate_body(body: str) -> str:
        if body is None or not body.strip():
            raise ValidationError("Comment body must not be empty")
        return body

    @staticmethod
    def _validate_alignment(alignment: int) -> Alignment:
        # Alignment(True) would pass since True == 1
        if isinstance(alignment, bool):
            raise ValidationError(
                f"Alignment must be one of -1, 0, 1 (got {alignment!r})"
            )
        try:
            return Alignment(alignment)
        except ValueError:
            raise ValidationError(
                f"Alignment must be one of -1, 0, 1 (got {alignment!r})"
            )

    @staticmethod
    def _validate_direction(direction: VoteDirection | str) -> VoteDirection:
        try:
            return VoteDirection(direction)
        except ValueError:
            raise ValidationError(
                f"Vote direction must be 'up' or 'down' (got {direction!r})"
            )
