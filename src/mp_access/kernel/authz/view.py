"""Kernel authz – caller-facing resource views."""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any

from mp_access.kernel.authz.authorization import Authorization
from mp_access.kernel.authz.resource_type import ResourceType

if TYPE_CHECKING:
    from mp_access.kernel.authz.resources import AccessControlled


@dataclasses.dataclass(frozen=True)
class View:
    """Resource name plus the caller's resolved authorizations.

    Deliberately holds no :class:`Permissions`, so granted group lists never
    reach a client.
    """

    name: str
    resource_type: ResourceType
    authorizations: frozenset[Authorization] = frozenset()

    def allows(self, authorization: Authorization) -> bool:
        return authorization in self.authorizations

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "authorizations": [a.value for a in Authorization.ordered(self.authorizations)],
        }


def to_view(resource: "AccessControlled") -> View:
    """Project *resource* to a :class:`View` using only its public surface."""
    return View(
        name=resource.name,
        resource_type=resource.resource_type,
        authorizations=frozenset(resource.authorizations),
    )


__all__ = ["View", "to_view"]
