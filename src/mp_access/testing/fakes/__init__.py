"""Testing fakes – in-memory doubles for upstream ports."""
from mp_access.testing.fakes.source import InMemoryDefinitionSource

__all__ = ["InMemoryDefinitionSource"]
