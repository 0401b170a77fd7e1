"""Kernel authz – access-controlled resources.

Every resource kind embeds an :class:`AccessControl` holding its name, its
:class:`Permissions` and the authorizations resolved for *one* caller.

Resolved authorizations are a per-request projection.  Never attach them to a
shared (cached) definition; clone first::

    mine = shared.clone_without_authorizations()
    mine.set_authorizations(mine.permissions.get_authorizations(roles))
    mine.get_view()
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar, Iterable, Protocol, TypeVar, Union

from mp_access.kernel.authz.authorization import Authorization
from mp_access.kernel.authz.legacy import apply_legacy_membership
from mp_access.kernel.authz.permissions import EMPTY, Permissions
from mp_access.kernel.authz.resource_type import ResourceType
from mp_access.kernel.authz.view import View, to_view

R = TypeVar("R", bound="AccessControlled")


class AccessControlled(Protocol):
    """Capability shared by every access-controlled resource kind."""

    resource_type: ClassVar[ResourceType]

    @property
    def name(self) -> str: ...

    @property
    def permissions(self) -> Permissions: ...

    @property
    def authorizations(self) -> frozenset[Authorization]: ...

    def set_authorizations(self: R, authorizations: Iterable[Authorization]) -> R: ...

    def clone_without_authorizations(self: R) -> R: ...

    def get_view(self) -> View: ...


@dataclasses.dataclass
class AccessControl:
    """Name, permissions and caller-resolved authorizations of a resource."""

    name: str
    permissions: Permissions = EMPTY
    authorizations: frozenset[Authorization] = frozenset()

    def without_authorizations(self) -> "AccessControl":
        return AccessControl(self.name, self.permissions)


class _Delegating:
    """Forwards the :class:`AccessControlled` surface to ``self.access``."""

    access: AccessControl

    @property
    def name(self) -> str:
        return self.access.name

    @property
    def permissions(self) -> Permissions:
        return self.access.permissions

    @property
    def authorizations(self) -> frozenset[Authorization]:
        return self.access.authorizations

    def set_authorizations(self: R, authorizations: Iterable[Authorization]) -> R:
        """Attach the authorizations resolved for the current caller.

        Only call this on a private copy from :meth:`clone_without_authorizations`.
        """
        self.access.authorizations = frozenset(authorizations)  # type: ignore[attr-defined]
        return self

    def clone_without_authorizations(self: R) -> R:
        return dataclasses.replace(  # type: ignore[type-var]
            self, access=self.access.without_authorizations()  # type: ignore[attr-defined]
        )

    def get_view(self) -> View:
        return to_view(self)  # type: ignore[arg-type]


@dataclasses.dataclass
class Account(_Delegating):
    """A cloud account, optionally tagged with its cloud provider."""

    resource_type: ClassVar[ResourceType] = ResourceType.ACCOUNT

    access: AccessControl
    cloud_provider: str | None = None

    @classmethod
    def create(
        cls,
        name: str,
        *,
        cloud_provider: str | None = None,
        permissions: Permissions | None = None,
        required_group_membership: list[str] | None = None,
    ) -> "Account":
        resolved = apply_legacy_membership(
            name, cls.resource_type, permissions or EMPTY, required_group_membership
        )
        return cls(AccessControl(name, resolved), cloud_provider)


@dataclasses.dataclass
class Application(_Delegating):
    resource_type: ClassVar[ResourceType] = ResourceType.APPLICATION

    access: AccessControl

    @classmethod
    def create(
        cls,
        name: str,
        *,
        permissions: Permissions | None = None,
        required_group_membership: list[str] | None = None,
    ) -> "Application":
        resolved = apply_legacy_membership(
            name, cls.resource_type, permissions or EMPTY, required_group_membership
        )
        return cls(AccessControl(name, resolved))


AccessControlledResource = Union[Account, Application]

__all__ = [
    "AccessControl",
    "AccessControlled",
    "AccessControlledResource",
    "Account",
    "Application",
]
