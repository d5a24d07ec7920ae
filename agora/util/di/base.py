"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with an in-memory stand-in for unit tests
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Common base for agora providers.

    Attributes:
        __mock_component__: Name used by ``build_test_container(unmock=...)``;
            None for providers that are never swapped
        __is_mock__: True on the in-memory implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
