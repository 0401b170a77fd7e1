"""Application-layer errors — raised at use-case level."""

from __future__ import annotations

from typing import Any

from mp_access.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class ForbiddenError(ApplicationError):
    """Caller does not hold the required authorization on a resource."""

    default_code = "forbidden"

    def __init__(
        self,
        message: str = "Access denied",
        *,
        resource: str | None = None,
        authorization: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.resource = resource
        self.authorization = authorization
        self.detail.setdefault("resource", resource)
        self.detail.setdefault("authorization", authorization)


__all__ = ["ApplicationError", "ForbiddenError"]
