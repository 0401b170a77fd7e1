"""Application providers – ResourceProvider base.

A provider loads resource definitions from a :class:`ResourceDefinitionSource`,
parses them into access-controlled resources and tracks whether its last
fetch succeeded.
"""
from __future__ import annotations

import abc
import asyncio
from typing import Any, ClassVar, Generic, Iterable, Mapping, TypeVar

from mp_access.application.providers.source import ResourceDefinitionSource
from mp_access.config.settings import AccessSettings
from mp_access.kernel.authz import Account, Application, normalize_groups
from mp_access.kernel.errors import MalformedResourceError, ProviderError
from mp_access.observability.health import HealthCheck, HealthStatus
from mp_access.observability.logging import get_logger

R = TypeVar("R", Account, Application)
P = TypeVar("P", bound="ResourceProvider[Any]")


class ResourceProvider(abc.ABC, Generic[R]):
    """Loads one kind of access-controlled resource."""

    kind: ClassVar[str] = "resource"

    def __init__(
        self,
        source: ResourceDefinitionSource,
        *,
        timeout: float | None = None,
    ) -> None:
        self._source = source
        self._timeout = timeout
        self._healthy = False
        self._last_error: str | None = None

    @classmethod
    def from_settings(
        cls: type[P],
        source: ResourceDefinitionSource,
        settings: AccessSettings,
    ) -> P:
        """Build a provider whose fetches are bounded by ``fetch_timeout_seconds``."""
        return cls(source, timeout=settings.fetch_timeout_seconds)

    @property
    def healthy(self) -> bool:
        return self._healthy

    @property
    def last_error(self) -> str | None:
        return self._last_error

    @abc.abstractmethod
    def parse(self, record: Mapping[str, Any]) -> R:
        """Turn one wire record into a resource (raises MalformedResourceError)."""

    async def get_all(self) -> list[R]:
        """Fetch and parse every definition.

        Malformed definitions are rejected one by one and logged; the rest
        are still returned.
        """
        log = get_logger(__name__, provider=self.kind)
        try:
            records = await asyncio.wait_for(self._source.fetch(), self._timeout)
        except Exception as exc:
            self._failure(exc)
            log.error("provider_fetch_failed", error=repr(exc))
            raise ProviderError(self.kind, cause=exc) from exc
        self._success()

        resources: list[R] = []
        for record in records:
            try:
                resources.append(self.parse(record))
            except MalformedResourceError as exc:
                log.error(
                    "resource_definition_rejected",
                    resource=exc.resource_name,
                    errors=exc.errors,
                )
        return resources

    async def get_all_restricted(self, groups: Iterable[str]) -> list[R]:
        """Resources granting at least one authorization to any of *groups*."""
        wanted = normalize_groups(groups)
        return [r for r in await self.get_all() if not wanted.isdisjoint(r.permissions.all_groups())]

    async def get_all_unrestricted(self) -> list[R]:
        """Resources that grant everything to everyone."""
        return [r for r in await self.get_all() if not r.permissions.is_restricted()]

    def health_check(self) -> "ProviderHealthCheck":
        return ProviderHealthCheck(self)

    def _success(self) -> None:
        self._healthy = True
        self._last_error = None

    def _failure(self, exc: BaseException) -> None:
        self._healthy = False
        self._last_error = repr(exc)


class ProviderHealthCheck(HealthCheck):
    """Reports the outcome of a provider's most recent fetch."""

    def __init__(self, provider: ResourceProvider[Any]) -> None:
        self._provider = provider

    @property
    def name(self) -> str:
        return f"{self._provider.kind}_provider"

    async def check(self) -> HealthStatus:
        if self._provider.healthy:
            return HealthStatus(healthy=True)
        return HealthStatus(
            healthy=False,
            detail=self._provider.last_error or "no successful fetch yet",
        )


__all__ = ["ProviderHealthCheck", "ResourceProvider"]
