"""Shared fixtures and context for BDD step definitions."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Generator

import pytest

from domain.errors import EntityStoreError
from domain.ports import EntityStorePort
from infra.persistence import InMemoryEntityStore, SQLiteEntityStore


@dataclass
class StoreContext:
    """Holds mutable state shared across BDD steps."""

    store: EntityStorePort = None  # type: ignore[assignment]
    error: EntityStoreError | None = None

    def attempt(self, action: Callable[[], object]) -> None:
        self.error = None
        try:
            action()
        except EntityStoreError as exc:
            self.error = exc


@pytest.fixture()
def store_ctx() -> StoreContext:
    return StoreContext()


@pytest.fixture()
def open_store(tmp_path: str) -> Generator[Callable[[str], EntityStorePort], None, None]:
    """Factory building a fresh store per backend name; SQLite files are closed afterwards."""
    opened: list[SQLiteEntityStore] = []

    def _open(backend: str) -> EntityStorePort:
        if backend == "memory":
            return InMemoryEntityStore()
        store = SQLiteEntityStore(db_path=os.path.join(tmp_path, f"bdd-{len(opened)}.db"))
        opened.append(store)
        return store

    yield _open
    for store in opened:
        store.close()
