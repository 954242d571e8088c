"""Dependency injection module."""

from typing import Type

from forum.util.di.application import ProdApplicationProvider
from forum.util.di.base import Component, ProviderBase
from forum.util.di.core import ProdConfigProvider
from forum.util.di.domain import ProdDomainProvider
from forum.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

# Config, domain and application providers are always real;
# PersistenceProvider is resolved to its production or mock subclass
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def build_providers(mock: set[Component] | None = None) -> list[ProviderBase]:
    """Instantiate every provider, using mocks for the given components.

    Args:
        mock: Components to replace with their mock implementations

    Returns:
        Provider instances ready for make_async_container
    """
    mock = mock or set()
    return [
        base.implementation(use_mock=base.__mock_component__ in mock)()
        for base in PROVIDERS
    ]


def mockable_components() -> set[Component]:
    """Names of all components that have a mock implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.is_mockable() and base.__mock_component__
    }


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "build_providers",
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
