"""Kernel authz – Authorization, Permissions, resources and views."""
from mp_access.kernel.authz.authorization import ALL_AUTHORIZATIONS, Authorization
from mp_access.kernel.authz.groups import normalize_group, normalize_groups
from mp_access.kernel.authz.legacy import apply_legacy_membership
from mp_access.kernel.authz.permissions import EMPTY, Permissions, PermissionsBuilder
from mp_access.kernel.authz.resource_type import ResourceType
from mp_access.kernel.authz.resources import (
    AccessControl,
    AccessControlled,
    AccessControlledResource,
    Account,
    Application,
)
from mp_access.kernel.authz.view import View, to_view
from mp_access.kernel.authz.wire import (
    AccountRecord,
    ApplicationRecord,
    account_from_record,
    application_from_record,
    permissions_from_wire,
    permissions_to_wire,
)

__all__ = [
    "ALL_AUTHORIZATIONS",
    "AccessControl",
    "AccessControlled",
    "AccessControlledResource",
    "Account",
    "AccountRecord",
    "Application",
    "ApplicationRecord",
    "Authorization",
    "EMPTY",
    "Permissions",
    "PermissionsBuilder",
    "ResourceType",
    "View",
    "account_from_record",
    "application_from_record",
    "apply_legacy_membership",
    "normalize_group",
    "normalize_groups",
    "permissions_from_wire",
    "permissions_to_wire",
    "to_view",
]
