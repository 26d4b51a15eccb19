from __future__ import annotations

from domain.models import StoreConfig
from domain.ports import EntityStorePort, IdGeneratorPort
from infra.persistence import InMemoryEntityStore, SQLiteEntityStore
from infra.runtime import SequentialIdGenerator, UuidIdGenerator


def build_id_generator(strategy: str, *, prefix: str = "id") -> IdGeneratorPort:
    if strategy == "sequential":
        return SequentialIdGenerator()
    if strategy == "uuid":
        return UuidIdGenerator(prefix=prefix)
    raise ValueError(f"Unknown id strategy: {strategy!r}")


def build_entity_store(config: StoreConfig, collection: str) -> EntityStorePort:
    """Construct the store described by ``config`` for one collection."""
    ids = build_id_generator(config.id_strategy, prefix=collection)
    if config.backend == "memory":
        return InMemoryEntityStore(
            id_generator=ids,
            allow_overwrite=config.allow_overwrite,
        )
    if config.backend == "sqlite":
        return SQLiteEntityStore(
            db_path=config.db_path,
            collection=collection,
            id_generator=ids,
            allow_overwrite=config.allow_overwrite,
        )
    raise ValueError(f"Unknown backend: {config.backend!r}")
