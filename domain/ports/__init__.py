from __future__ import annotations

from abc import abstractmethod
from typing import Any, Protocol, Sequence, runtime_checkable

from domain.models import Identifier, Order, Record, Scalar, StoreConfig


@runtime_checkable
class EntityStorePort(Protocol):
    """
    Uniform CRUD contract over identifier-keyed records.

    ``create`` rejects a colliding identifier with ``DuplicateKeyError``
    unless the concrete store was built to overwrite. ``read``, ``update``
    and ``delete`` raise ``NotFoundError`` for identifiers the store does
    not hold. ``find_all`` returns records in insertion order.
    """

    @abstractmethod
    def create(self, record: Record) -> Identifier:
        ...

    @abstractmethod
    def read(self, identifier: Identifier) -> Record:
        ...

    @abstractmethod
    def update(self, record: Record) -> None:
        ...

    @abstractmethod
    def delete(self, identifier: Identifier) -> None:
        ...

    @abstractmethod
    def find_all(self) -> Sequence[Record]:
        ...

    @abstractmethod
    def find_by_id(self, identifier: Identifier) -> Record | None:
        ...

    @abstractmethod
    def find_by(self, **criteria: Scalar) -> Sequence[Record]:
        ...

    @abstractmethod
    def save(self, record: Record) -> Identifier:
        ...

    @abstractmethod
    def exists(self, identifier: Identifier) -> bool:
        ...

    @abstractmethod
    def count(self) -> int:
        ...


@runtime_checkable
class IdGeneratorPort(Protocol):
    """Source of identifiers for records created without one."""

    def next_id(self) -> Identifier:
        ...


@runtime_checkable
class LoggerPort(Protocol):
    """Structured, testable logging abstraction."""

    def info(self, message: str, **fields: Any) -> None:
        ...

    def warning(self, message: str, **fields: Any) -> None:
        ...

    def error(self, message: str, **fields: Any) -> None:
        ...


@runtime_checkable
class OrderFulfilmentPort(Protocol):
    """Side effects performed around persisting an order."""

    def reserve_items(self, order: Order) -> None:
        ...

    def process_payment(self, order: Order) -> None:
        ...

    def schedule_shipping(self, order: Order) -> None:
        ...

    def send_confirmation(self, order: Order) -> None:
        ...


@runtime_checkable
class ConfigProviderPort(Protocol):
    """Loads and validates store configuration."""

    def get_config(self) -> StoreConfig:
        ...

    def validate(self) -> list[str]:
        ...


__all__ = [
    "EntityStorePort",
    "IdGeneratorPort",
    "LoggerPort",
    "OrderFulfilmentPort",
    "ConfigProviderPort",
]
