"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable base for comments, votes and commentables.

    Edits go through ``model_copy(update=...)`` so a loaded entity never
    changes under a caller.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )
