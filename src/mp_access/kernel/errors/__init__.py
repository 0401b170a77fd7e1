"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── ValidationError
    │       └── MalformedResourceError
    ├── ApplicationError         (application.py)
    │   └── ForbiddenError
    └── InfrastructureError      (infrastructure.py)
        └── ProviderError
"""

from mp_access.kernel.errors.application import ApplicationError, ForbiddenError
from mp_access.kernel.errors.base import BaseError
from mp_access.kernel.errors.domain import (
    DomainError,
    MalformedResourceError,
    ValidationError,
)
from mp_access.kernel.errors.infrastructure import InfrastructureError, ProviderError

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
