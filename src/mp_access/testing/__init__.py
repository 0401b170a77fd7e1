"""Testing support – fakes and property-based generators.

Example::

    from mp_access.testing import InMemoryDefinitionSource, permissions_strategy
"""

from mp_access.testing.fakes import InMemoryDefinitionSource
from mp_access.testing.generators import (
    group_name_strategy,
    permissions_strategy,
    roles_strategy,
)

__all__ = [
    "InMemoryDefinitionSource",
    "group_name_strategy",
    "permissions_strategy",
    "roles_strategy",
]
