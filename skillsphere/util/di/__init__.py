"""Dependency injection wiring.

``PROVIDERS`` lists one class per component. Concrete providers are used as
they are; mockable components (currently only persistence) are bases whose
subclasses are the production and mock implementations.
"""

from typing import Type

from skillsphere.util.di.application import ProdApplicationProvider
from skillsphere.util.di.base import Component, ProviderBase
from skillsphere.util.di.core import ProdConfigProvider
from skillsphere.util.di.domain import ProdDomainProvider
from skillsphere.util.di.engine import ProdEngineProvider
from skillsphere.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)
from skillsphere.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    PersistenceProvider,
    ProdDomainProvider,
    ProdEngineProvider,
    ProdApplicationProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for ``base``.

    Raises:
        DependencyInjectionError: If a mockable component lacks the requested
            implementation
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component = base.__mock_component__ or base.__name__
    raise DependencyInjectionError(f"{component} has no {kind} provider")


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdEngineProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
