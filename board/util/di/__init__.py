"""Dependency injection wiring for postboard.

Every provider class listed in ``PROVIDERS`` is either concrete (config,
domain services, use cases) or a component base with one production and one
mock subclass (persistence). ``get_provider`` resolves a listed class to the
class that should actually be instantiated.
"""

from typing import Type

from board.util.di.application import ProdApplicationProvider
from board.util.di.base import Component, ProviderBase
from board.util.di.core import ProdConfigProvider
from board.util.di.domain import ProdDomainProvider
from board.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider
from board.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Mockable
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a listed provider to the implementation to instantiate.

    A class without subclasses is used as is. A component base is swapped
    for the subclass whose ``__is_mock__`` equals ``use_mock``; mock
    subclasses only exist once the test package has imported them.

    Raises:
        DependencyInjectionError: If the component has no implementation of
            the requested kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for implementation in implementations:
        if getattr(implementation, "__is_mock__", False) == use_mock:
            return implementation

    kind = "mock" if use_mock else "production"
    component = getattr(base, "__mock_component__", None) or base.__name__
    raise DependencyInjectionError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
