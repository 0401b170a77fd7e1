"""Application providers – ResourceDefinitionSource port."""
from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence


class ResourceDefinitionSource(Protocol):
    """Port: fetch raw resource definitions from an upstream inventory service.

    Each record is a wire mapping such as::

        {"name": "prod", "cloudProvider": "aws",
         "permissions": {"READ": ["ops"], "WRITE": ["ops-admin"]}}
    """

    async def fetch(self) -> Sequence[Mapping[str, Any]]: ...


__all__ = ["ResourceDefinitionSource"]
