"""Infrastructure adapters – concrete implementations of domain ports."""

from .config import FileSystemConfigProvider
from .persistence import InMemoryEntityStore, SQLiteEntityStore
from .runtime import (
    LoggingOrderFulfilment,
    SequentialIdGenerator,
    StructuredLogger,
    UuidIdGenerator,
)
from .store_factory import build_entity_store

__all__ = [
    "FileSystemConfigProvider",
    "InMemoryEntityStore",
    "SQLiteEntityStore",
    "SequentialIdGenerator",
    "UuidIdGenerator",
    "StructuredLogger",
    "LoggingOrderFulfilment",
    "build_entity_store",
]
