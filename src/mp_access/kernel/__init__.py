"""Kernel – framework-agnostic access-control model."""

from mp_access.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ForbiddenError,
    InfrastructureError,
    MalformedResourceError,
    ProviderError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ForbiddenError",
    "InfrastructureError",
    "MalformedResourceError",
    "ProviderError",
    "ValidationError",
]
