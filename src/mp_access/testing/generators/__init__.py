"""Testing generators – Hypothesis strategies for the authorization model."""
from mp_access.testing.generators.strategies import (
    group_name_strategy,
    permissions_strategy,
    roles_strategy,
)

__all__ = ["group_name_strategy", "permissions_strategy", "roles_strategy"]
