"""Kernel authz – group name normalization."""
from __future__ import annotations

from typing import Iterable, TypeVar

T = TypeVar("T")


def normalize_group(group: str) -> str:
    """Trim surrounding whitespace and lowercase *group*.

    Idempotent.  ``None`` or any non-``str`` value is a caller bug and fails
    immediately with :class:`TypeError`.
    """
    if not isinstance(group, str):
        raise TypeError(f"group name must be a str, got {type(group).__name__}")
    return group.strip().lower()


def require_collection(values: Iterable[T], name: str = "groups") -> Iterable[T]:
    """Reject a bare ``str`` (or ``None``) where a collection of names is expected.

    Iterating ``"ops"`` would yield ``"o"``, ``"p"``, ``"s"``.
    """
    if isinstance(values, str):
        raise TypeError(f"{name} must be a collection of str, not a bare str: {values!r}")
    if values is None:
        raise TypeError(f"{name} must not be None")
    return values


def normalize_groups(groups: Iterable[str]) -> frozenset[str]:
    """Normalize a caller's role names so they compare equal to stored groups."""
    return frozenset(normalize_group(g) for g in require_collection(groups, "groups"))


__all__ = ["normalize_group", "normalize_groups", "require_collection"]
