"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (malformed input such as an empty body)."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DepthExceededError(BusinessRuleViolationError):
    """Raised when a reply would go deeper than the comment tree allows."""

    def __init__(self, depth: int, max_depth: int):
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"Cannot reply to a commentable at depth {depth} (max depth {max_depth})"
        )


class OrganizationMismatchError(BusinessRuleViolationError):
    """Raised when the author and the commentable belong to different organizations."""

    def __init__(self, author_organization: str, commentable_organization: str):
        self.author_organization = author_organization
        self.commentable_organization = commentable_organization
        super().__init__(
            f"Author organization {author_organization} does not match "
            f"commentable organization {commentable_organization}"
        )


class DuplicateVoteError(BusinessRuleViolationError):
    """Raised when a user votes twice on the same comment."""

    def __init__(self, comment_id: str, author_id: str):
        self.comment_id = comment_id
        self.author_id = author_id
        super().__init__(f"User {author_id} already voted on comment {comment_id}")
