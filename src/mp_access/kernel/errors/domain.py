"""Domain errors — rejected resource definitions and invalid input."""

from __future__ import annotations

from typing import Any

from mp_access.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class MalformedResourceError(ValidationError):
    """A resource definition (or its permissions payload) failed wire validation.

    Raised at the deserialization boundary; the rejection applies to that one
    resource definition only.
    """

    default_code = "malformed_resource"

    def __init__(
        self,
        message: str,
        *,
        resource_name: str | None = None,
        resource_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.resource_name = resource_name
        self.resource_type = resource_type
        self.detail.setdefault("resource_name", resource_name)
        self.detail.setdefault("resource_type", resource_type)


__all__ = [
    "DomainError",
    "MalformedResourceError",
    "ValidationError",
]
