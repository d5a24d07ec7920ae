"""Strongly typed identifiers for comment tree entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
OrganizationId = NewType("OrganizationId", UUID)
CommentId = NewType("CommentId", UUID)
CommentVoteId = NewType("CommentVoteId", UUID)
