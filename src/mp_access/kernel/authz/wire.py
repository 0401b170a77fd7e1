"""Kernel authz – wire codec for permissions and resource records.

Permissions travel as::

    {"READ": ["group1", "group2"], "WRITE": ["group1"]}

Keys use the exact :class:`Authorization` spelling.  Groups are normalized on
the way in.  A missing or empty object means "unrestricted".

Resource records may instead carry the deprecated flat
``requiredGroupMembership`` list; it only applies when ``permissions`` is
missing or empty.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

import pydantic
from pydantic import BaseModel, ConfigDict, Field, StrictStr, TypeAdapter

from mp_access.kernel.authz.authorization import Authorization
from mp_access.kernel.authz.permissions import EMPTY, Permissions, PermissionsBuilder
from mp_access.kernel.authz.resource_type import ResourceType
from mp_access.kernel.authz.resources import Account, Application
from mp_access.kernel.errors import MalformedResourceError

PermissionsPayload = dict[Authorization, list[StrictStr]]

_PERMISSIONS_ADAPTER: TypeAdapter[PermissionsPayload] = TypeAdapter(PermissionsPayload)


def _errors(exc: pydantic.ValidationError) -> list[dict[str, Any]]:
    return [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in exc.errors()
    ]


def _build(payload: Mapping[Authorization, list[str]] | None) -> Permissions:
    if not payload:
        return EMPTY
    return PermissionsBuilder().set(payload).build()


def permissions_from_wire(payload: Mapping[str, Any] | None) -> Permissions:
    """Validate and normalize a wire permissions object.

    Raises
    ------
    MalformedResourceError
        On an unknown authorization key or a non-string group entry.
    """
    if not payload:
        return EMPTY
    try:
        validated = _PERMISSIONS_ADAPTER.validate_python(payload)
    except pydantic.ValidationError as exc:
        raise MalformedResourceError(
            "invalid permissions payload", errors=_errors(exc), cause=exc
        ) from exc
    return _build(validated)


def permissions_to_wire(permissions: Permissions) -> dict[str, list[str]]:
    """Serialize *permissions*, keys in :class:`Authorization` declaration order."""
    return {a.value: groups for a, groups in permissions.as_dict().items()}


class ResourceRecord(BaseModel):
    """Common shape of an upstream resource definition."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    name: StrictStr
    permissions: Optional[PermissionsPayload] = None
    required_group_membership: Optional[list[StrictStr]] = Field(
        default=None, alias="requiredGroupMembership"
    )


class AccountRecord(ResourceRecord):
    cloud_provider: Optional[StrictStr] = Field(default=None, alias="cloudProvider")


class ApplicationRecord(ResourceRecord):
    pass


def _validate(model: type[ResourceRecord], raw: Mapping[str, Any], resource_type: ResourceType) -> Any:
    try:
        return model.model_validate(raw)
    except pydantic.ValidationError as exc:
        name = raw.get("name") if isinstance(raw, Mapping) else None
        raise MalformedResourceError(
            f"invalid {resource_type.value.lower()} definition",
            resource_name=name if isinstance(name, str) else None,
            resource_type=resource_type.value,
            errors=_errors(exc),
            cause=exc,
        ) from exc


def account_from_record(raw: Mapping[str, Any]) -> Account:
    record: AccountRecord = _validate(AccountRecord, raw, ResourceType.ACCOUNT)
    return Account.create(
        record.name,
        cloud_provider=record.cloud_provider,
        permissions=_build(record.permissions),
        required_group_membership=record.required_group_membership,
    )


def application_from_record(raw: Mapping[str, Any]) -> Application:
    record: ApplicationRecord = _validate(ApplicationRecord, raw, ResourceType.APPLICATION)
    return Application.create(
        record.name,
        permissions=_build(record.permissions),
        required_group_membership=record.required_group_membership,
    )


__all__ = [
    "AccountRecord",
    "ApplicationRecord",
    "ResourceRecord",
    "account_from_record",
    "application_from_record",
    "permissions_from_wire",
    "permissions_to_wire",
]
