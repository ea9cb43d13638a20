"""Provider base class and component names."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that have a mock implementation for tests
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for every postboard provider.

    Attributes:
        __mock_component__: Set on a component base to the component's name;
            None on concrete providers
        __is_mock__: True on the test implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
