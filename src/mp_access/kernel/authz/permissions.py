"""Kernel authz – Permissions value object and its builder.

A :class:`Permissions` maps each :class:`Authorization` to the ordered list of
(normalized) groups granted it.  Instances are immutable; build them with
:class:`PermissionsBuilder`::

    permissions = (
        Permissions.builder()
        .add(Authorization.READ, ["ops", "Ops-Admin "])
        .add(Authorization.WRITE, "ops-admin")
        .build()
    )
    permissions.get_authorizations({"ops"})   # frozenset({Authorization.READ})

A resource with no permissions configured is *unrestricted*: it grants every
authorization to every caller.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from mp_access.kernel.authz.authorization import ALL_AUTHORIZATIONS, Authorization
from mp_access.kernel.authz.groups import normalize_group, require_collection


class Permissions:
    """Immutable mapping ``Authorization -> tuple[str, ...]`` of granted groups.

    Groups are normalized on construction, whichever way the instance is made.
    """

    __slots__ = ("_grants",)

    EMPTY: "Permissions"

    def __init__(self, grants: Mapping[Authorization, Iterable[str]] | None = None) -> None:
        frozen = {
            Authorization(a): tuple(normalize_group(g) for g in require_collection(groups))
            for a, groups in (grants or {}).items()
        }
        object.__setattr__(self, "_grants", MappingProxyType(frozen))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @staticmethod
    def builder() -> "PermissionsBuilder":
        return PermissionsBuilder()

    # Queries -----------------------------------------------------------

    def get(self, authorization: Authorization) -> tuple[str, ...]:
        """Groups granted *authorization*; empty when none are configured."""
        return self._grants.get(authorization, ())

    def all_groups(self) -> list[str]:
        """Every granted group across all authorizations, duplicates preserved."""
        return [group for groups in self._grants.values() for group in groups]

    def authorizations(self) -> frozenset[Authorization]:
        """Authorizations that have an entry (possibly an empty one)."""
        return frozenset(self._grants)

    def items(self) -> Iterator[tuple[Authorization, tuple[str, ...]]]:
        return iter(self._grants.items())

    def is_empty(self) -> bool:
        return not self._grants

    def is_restricted(self) -> bool:
        return any(groups for groups in self._grants.values())

    def get_authorizations(self, roles: Iterable[str]) -> frozenset[Authorization]:
        """Resolve the authorizations held by a caller with *roles*.

        Unrestricted (empty) permissions grant everything.  Otherwise an
        authorization is held iff its group list shares at least one entry
        with *roles*.  Roles are compared verbatim against the lowercased
        stored groups, so callers must normalize them first (see
        :func:`~mp_access.kernel.authz.groups.normalize_groups`).
        """
        require_collection(roles, "roles")
        if self.is_empty():
            return ALL_AUTHORIZATIONS
        caller = frozenset(roles)
        return frozenset(
            authorization
            for authorization, groups in self._grants.items()
            if not caller.isdisjoint(groups)
        )

    def as_dict(self) -> dict[Authorization, list[str]]:
        """Mutable copy of the grants, keyed in declaration order."""
        return {a: list(self._grants[a]) for a in Authorization if a in self._grants}

    # Value semantics ---------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Permissions):
            return NotImplemented
        return dict(self._grants) == dict(other._grants)

    def __hash__(self) -> int:
        return hash(frozenset(self._grants.items()))

    def __repr__(self) -> str:
        body = ", ".join(f"{a.value}={list(g)!r}" for a, g in self.as_dict().items())
        return f"Permissions({body})"


class PermissionsBuilder:
    """Mutable accumulator for :class:`Permissions`.

    Every group is normalized on the way in.  :meth:`build` takes a snapshot,
    so later changes to the builder never reach an already-built instance.
    """

    def __init__(self) -> None:
        self._grants: dict[Authorization, list[str]] = {}

    def set(self, grants: Mapping[Authorization | str, Iterable[str]]) -> "PermissionsBuilder":
        """Replace the whole accumulator with *grants*."""
        self._grants.clear()
        for authorization, groups in grants.items():
            self._grants[Authorization(authorization)] = [
                normalize_group(g) for g in require_collection(groups)
            ]
        return self

    def add(self, authorization: Authorization, groups: str | Iterable[str]) -> "PermissionsBuilder":
        """Append one group, or each group of an iterable, under *authorization*."""
        if isinstance(groups, str):
            groups = (groups,)
        elif groups is None:
            raise TypeError("groups must not be None")
        bucket = self._grants.setdefault(Authorization(authorization), [])
        bucket.extend(normalize_group(g) for g in groups)
        return self

    def build(self) -> Permissions:
        if not self._grants:
            return EMPTY
        return Permissions(self._grants)


EMPTY = Permissions()
Permissions.EMPTY = EMPTY

__all__ = ["EMPTY", "Permissions", "PermissionsBuilder"]
