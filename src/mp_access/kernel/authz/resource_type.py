"""Kernel authz – ResourceType tags."""
from __future__ import annotations

from enum import Enum


class ResourceType(str, Enum):
    ACCOUNT = "ACCOUNT"
    APPLICATION = "APPLICATION"
    SERVICE_ACCOUNT = "SERVICE_ACCOUNT"
    ROLE = "ROLE"


__all__ = ["ResourceType"]
