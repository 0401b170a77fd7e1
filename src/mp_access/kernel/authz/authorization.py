"""Kernel authz – Authorization kinds."""
from __future__ import annotations

from enum import Enum


class Authorization(str, Enum):
    """Permission kind grantable on a resource.

    Declaration order is the serialization order.
    """

    READ = "READ"
    WRITE = "WRITE"
    EXECUTE = "EXECUTE"
    CREATE = "CREATE"

    @classmethod
    def ordered(cls, authorizations: "set[Authorization] | frozenset[Authorization]") -> list["Authorization"]:
        """Return *authorizations* sorted by declaration order."""
        return [a for a in cls if a in authorizations]


ALL_AUTHORIZATIONS: frozenset[Authorization] = frozenset(Authorization)

__all__ = ["ALL_AUTHORIZATIONS", "Authorization"]
