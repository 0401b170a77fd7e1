"""Application – per-caller authorization resolution.

Shared resource definitions are never mutated here: every call works on a
private clone, so one caller's grants cannot leak to another.
"""
from __future__ import annotations

from typing import Iterable, TypeVar

from mp_access.kernel.authz import (
    AccessControlled,
    Authorization,
    View,
    normalize_groups,
)
from mp_access.kernel.errors import ForbiddenError

R = TypeVar("R", bound=AccessControlled)


class AuthorizationResolver:
    """Resolves what a caller may do with access-controlled resources.

    Caller roles are normalized the same way stored groups are, so
    ``{"Ops "}`` matches a grant to ``"ops"``.

    Example::

        resolver = AuthorizationResolver()
        views = resolver.views(snapshot.accounts, principal_roles)
        resolver.require(account, principal_roles, Authorization.WRITE)
    """

    def resolve(self, resource: R, roles: Iterable[str]) -> R:
        """Return a private copy of *resource* carrying the caller's authorizations."""
        copy = resource.clone_without_authorizations()
        return copy.set_authorizations(copy.permissions.get_authorizations(normalize_groups(roles)))

    def view(self, resource: AccessControlled, roles: Iterable[str]) -> View:
        return self.resolve(resource, roles).get_view()

    def views(
        self,
        resources: Iterable[AccessControlled],
        roles: Iterable[str],
        *,
        required: Authorization | None = Authorization.READ,
    ) -> list[View]:
        """Views of the resources the caller may see.

        A resource is omitted when the caller lacks *required*; with
        ``required=None`` it is omitted only when nothing is granted.
        """
        caller = normalize_groups(roles)
        visible: list[View] = []
        for resource in resources:
            view = self.view(resource, caller)
            if required is None and view.authorizations:
                visible.append(view)
            elif required is not None and view.allows(required):
                visible.append(view)
        return visible

    def require(self, resource: R, roles: Iterable[str], authorization: Authorization) -> R:
        """Resolve and raise :class:`ForbiddenError` unless *authorization* is held."""
        resolved = self.resolve(resource, roles)
        if authorization not in resolved.authorizations:
            raise ForbiddenError(
                f"{authorization.value} denied on {resolved.resource_type.value.lower()} "
                f"{resolved.name!r}",
                resource=resolved.name,
                authorization=authorization.value,
            )
        return resolved


__all__ = ["AuthorizationResolver"]
