from __future__ import annotations

import os
from typing import Generator

import pytest

from domain.ports import EntityStorePort
from infra.persistence import InMemoryEntityStore, SQLiteEntityStore


@pytest.fixture(params=["memory", "sqlite"])
def any_store(request: pytest.FixtureRequest, tmp_path: str) -> Generator[EntityStorePort, None, None]:
    """Yield a fresh store for every backend so contract tests run against each."""
    if request.param == "memory":
        yield InMemoryEntityStore()
        return
    store = SQLiteEntityStore(db_path=os.path.join(tmp_path, "contract.db"))
    yield store
    store.close()
