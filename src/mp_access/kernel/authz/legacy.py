"""Kernel authz – ``requiredGroupMembership`` migration.

Before structured permissions existed a resource carried a flat list of
groups, each implying both READ and WRITE.  Resources are migrated once, at
construction time.  Structured permissions always win over the flat list.
"""
from __future__ import annotations

from typing import Sequence

from mp_access.kernel.authz.authorization import Authorization
from mp_access.kernel.authz.groups import require_collection
from mp_access.kernel.authz.permissions import Permissions, PermissionsBuilder
from mp_access.kernel.authz.resource_type import ResourceType
from mp_access.observability.logging import get_logger


def apply_legacy_membership(
    name: str,
    resource_type: ResourceType,
    permissions: Permissions,
    membership: Sequence[str] | None,
) -> Permissions:
    """Return the permissions a resource ends up with after migration.

    * empty or missing *membership*: *permissions* unchanged
    * non-empty *permissions*: unchanged, the flat list is ignored with a warning
    * otherwise: every listed group is granted READ and WRITE
    """
    if membership is None:
        return permissions
    require_collection(membership, "membership")
    if not membership:
        return permissions

    log = get_logger(__name__, resource=name, resource_type=resource_type.value)
    if not permissions.is_empty():
        log.warning("required_group_membership_ignored", reason="permissions are present")
        return permissions

    log.warning("required_group_membership_deprecated", groups=len(membership))
    builder = PermissionsBuilder()
    for group in membership:
        builder.add(Authorization.READ, group).add(Authorization.WRITE, group)
    return builder.build()


__all__ = ["apply_legacy_membership"]
