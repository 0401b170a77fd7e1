"""Application – providers, per-caller resolution and snapshots."""
from mp_access.application.providers import (
    AccountProvider,
    ApplicationProvider,
    ProviderHealthCheck,
    ResourceDefinitionSource,
    ResourceProvider,
)
from mp_access.application.resolver import AuthorizationResolver
from mp_access.application.snapshot import ResourceSnapshot, SnapshotHolder

__all__ = [
    "AccountProvider",
    "ApplicationProvider",
    "AuthorizationResolver",
    "ProviderHealthCheck",
    "ResourceDefinitionSource",
    "ResourceProvider",
    "ResourceSnapshot",
    "SnapshotHolder",
]
