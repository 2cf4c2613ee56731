"""Dependency injection module."""

from study.util.di.application import ProdApplicationProvider
from study.util.di.base import COMPONENTS, Component, ProviderBase
from study.util.di.core import ProdConfigProvider
from study.util.di.domain import ProdDomainProvider
from study.util.di.infrastructure import (
    PersistenceProvider,
    RealtimeProvider,
    StorageProvider,
)

# Concrete providers are used as-is; component bases resolve to a variant
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    RealtimeProvider,
    PersistenceProvider,
    StorageProvider,
]

__all__ = [
    "COMPONENTS",
    "Component",
    "PROVIDERS",
    "ProviderBase",
]
