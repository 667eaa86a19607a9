"""Dependency injection providers.

Each entry of PROVIDERS is either a concrete provider or the base class of a
swappable component whose subclasses are its production and mock variants.
"""

from typing import Type

from hivemind.util.di.application import ProdApplicationProvider
from hivemind.util.di.base import Component, ProviderBase
from hivemind.util.di.core import ProdConfigProvider
from hivemind.util.di.domain import ProdDomainProvider
from hivemind.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)
from hivemind.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,  # swappable: "persistence"
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for one PROVIDERS entry.

    Args:
        base: Entry of PROVIDERS
        use_mock: Pick the mock variant of a swappable component

    Returns:
        ``base`` itself for concrete providers, otherwise the subclass whose
        ``__is_mock__`` matches ``use_mock``

    Raises:
        DependencyInjectionError: If the component has no such variant
    """
    variants = base.__subclasses__()
    if not variants:
        return base

    for variant in variants:
        if variant.__is_mock__ == use_mock:
            return variant

    kind = "mock" if use_mock else "production"
    raise DependencyInjectionError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


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
