"""Domain value objects for the comment tree.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum, IntEnum
from uuid import UUID

from pydantic import Field, field_validator

from agora.domain.value.common import ValueObject

# Type tag used when the commentable is itself a comment (a reply)
COMMENT_TYPE = "comment"


class Alignment(IntEnum):
    """Declared stance of a comment towards its commentable."""

    AGAINST = -1
    NEUTRAL = 0
    IN_FAVOR = 1


class VoteWeight(IntEnum):
    """Weight stored for a comment vote."""

    DOWN = -1
    UP = 1


class VoteDirection(str, Enum):
    """Direction of a vote as requested by a user."""

    UP = "up"
    DOWN = "down"

    @property
    def weight(self) -> VoteWeight:
        """Stored weight for this direction."""
        return VoteWeight.UP if self is VoteDirection.UP else VoteWeight.DOWN


class CommentableRef(ValueObject):
    """Polymorphic reference to anything that can be commented on.

    Root resources use their own type tag (e.g. 'proposal', 'debate');
    replies point at another comment with the 'comment' tag.
    """

    type: str = Field(min_length=1, max_length=255)
    id: UUID

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        """Type tags are stored lowercase without surrounding whitespace."""
        v = v.strip().lower()
        if not v:
            raise ValueError("Commentable type must not be blank")
        return v

    @classmethod
    def for_comment(cls, comment_id: UUID) -> "CommentableRef":
        """Reference to a comment, used as the target of a reply."""
        return cls(type=COMMENT_TYPE, id=comment_id)

    @property
    def is_comment(self) -> bool:
        return self.type == COMMENT_TYPE

    def __str__(self) -> str:
        return f"{self.type}:{self.id}"


class VoteTally(ValueObject):
    """Up and down vote counts of a comment."""

    up: int = Field(default=0, ge=0)
    down: int = Field(default=0, ge=0)

    @property
    def score(self) -> int:
        return self.up - self.down
