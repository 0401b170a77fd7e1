"""Application providers – load resource definitions from upstream sources."""
from mp_access.application.providers.accounts import AccountProvider, ApplicationProvider
from mp_access.application.providers.provider import ProviderHealthCheck, ResourceProvider
from mp_access.application.providers.source import ResourceDefinitionSource

__all__ = [
    "AccountProvider",
    "ApplicationProvider",
    "ProviderHealthCheck",
    "ResourceDefinitionSource",
    "ResourceProvider",
]
