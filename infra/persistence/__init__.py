"""Entity store adapters implementing ``EntityStorePort``."""

from .in_memory_entity_store import InMemoryEntityStore
from .sqlite_entity_store import SQLiteEntityStore

__all__ = [
    "InMemoryEntityStore",
    "SQLiteEntityStore",
]
