"""Application – published snapshots of resource definitions.

A refresh builds a complete new :class:`ResourceSnapshot` and swaps it in with
a single reference assignment.  Evaluations that already hold the previous
snapshot keep using it unchanged.
"""
from __future__ import annotations

import asyncio
import dataclasses
from datetime import UTC, datetime

from mp_access.application.providers import AccountProvider, ApplicationProvider
from mp_access.kernel.authz import Account, Application
from mp_access.observability.logging import get_logger


@dataclasses.dataclass(frozen=True, eq=False)
class ResourceSnapshot:
    """Read-mostly set of resource definitions.  Resolve via clones only.

    Compared and hashed by identity: each published snapshot is distinct.
    """

    accounts: tuple[Account, ...] = ()
    applications: tuple[Application, ...] = ()
    loaded_at: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))

    def account(self, name: str) -> Account | None:
        return next((a for a in self.accounts if a.name == name), None)

    def application(self, name: str) -> Application | None:
        return next((a for a in self.applications if a.name == name), None)


class SnapshotHolder:
    """Holds the current :class:`ResourceSnapshot`."""

    def __init__(self, initial: ResourceSnapshot | None = None) -> None:
        self._current = initial or ResourceSnapshot()

    @property
    def current(self) -> ResourceSnapshot:
        return self._current

    def publish(self, snapshot: ResourceSnapshot) -> ResourceSnapshot:
        self._current = snapshot
        get_logger(__name__).info(
            "snapshot_published",
            accounts=len(snapshot.accounts),
            applications=len(snapshot.applications),
        )
        return snapshot

    async def refresh(
        self,
        accounts: AccountProvider,
        applications: ApplicationProvider,
    ) -> ResourceSnapshot:
        """Load both kinds and publish.  On failure the current snapshot stays."""
        loaded_accounts, loaded_applications = await asyncio.gather(
            accounts.get_all(), applications.get_all()
        )
        return self.publish(
            ResourceSnapshot(
                accounts=tuple(loaded_accounts),
                applications=tuple(loaded_applications),
            )
        )


__all__ = ["ResourceSnapshot", "SnapshotHolder"]
