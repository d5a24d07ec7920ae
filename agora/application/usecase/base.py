"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Turns a pydantic request into domain service calls and a response model."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        """Run the use case; domain errors propagate to the caller."""
