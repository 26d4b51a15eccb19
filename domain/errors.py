from __future__ import annotations

from domain.models import Identifier


class EntityStoreError(Exception):
    """Base class for failures raised by entity stores."""


class NotFoundError(EntityStoreError, LookupError):
    """Raised when an operation targets an identifier the store does not hold."""

    def __init__(self, identifier: Identifier | None, collection: str | None = None) -> None:
        self.identifier = identifier
        self.collection = collection
        where = f" in collection {collection!r}" if collection else ""
        super().__init__(f"No record with id {identifier!r}{where}")


class DuplicateKeyError(EntityStoreError, ValueError):
    """Raised when ``create`` collides with an existing identifier."""

    def __init__(self, identifier: Identifier, collection: str | None = None) -> None:
        self.identifier = identifier
        self.collection = collection
        where = f" in collection {collection!r}" if collection else ""
        super().__init__(f"Record with id {identifier!r} already exists{where}")


__all__ = ["EntityStoreError", "NotFoundError", "DuplicateKeyError"]
