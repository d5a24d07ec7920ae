"""Domain services."""

from .base import Service
from .comment_tree import DEFAULT_MAX_DEPTH, CommentTree

__all__ = [
    "CommentTree",
    "DEFAULT_MAX_DEPTH",
    "Service",
]
