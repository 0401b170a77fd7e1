"""Infrastructure errors — failures of upstream resource-definition sources."""

from __future__ import annotations

from typing import Any

from mp_access.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a policy outcome."""

    default_code = "infrastructure_error"


class ProviderError(InfrastructureError):
    """A resource provider could not load definitions from its source."""

    default_code = "provider_error"

    def __init__(
        self,
        provider: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Provider '{provider}' failed to load resources", **kwargs)
        self.provider = provider
        self.detail.setdefault("provider", provider)


__all__ = ["InfrastructureError", "ProviderError"]
