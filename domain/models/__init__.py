from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping, Sequence, Union

Identifier = Union[int, str]
Scalar = Union[str, int, float, bool, None]

_SCALAR_TYPES = (str, int, float, bool, type(None))


def _check_identifier(value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise TypeError(f"Record id must be int or str, got {type(value).__name__}")


@dataclass(frozen=True)
class Record:
    """
    A single stored entity: an identifier plus a bundle of scalar fields.

    ``id`` is ``None`` until a store assigns one. Field values are limited
    to scalars so every backend can persist them without a schema.
    """

    id: Identifier | None
    fields: Mapping[str, Scalar] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.id is not None:
            _check_identifier(self.id)
        for name, value in self.fields.items():
            if not isinstance(name, str):
                raise TypeError(f"Field names must be str, got {name!r}")
            if name == "id":
                raise ValueError("'id' is reserved for the record identifier")
            if not isinstance(value, _SCALAR_TYPES):
                raise TypeError(
                    f"Field {name!r} must hold a scalar, got {type(value).__name__}"
                )
        # Read-only copy; callers keep no handle on the stored mapping.
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __hash__(self) -> int:
        # Field names are unique, so sorting never compares values.
        return hash((self.id, tuple(sorted(self.fields.items()))))

    def get(self, name: str, default: Scalar = None) -> Scalar:
        return self.fields.get(name, default)

    def with_id(self, identifier: Identifier) -> Record:
        return replace(self, id=identifier)

    def with_fields(self, **changes: Scalar) -> Record:
        merged = dict(self.fields)
        merged.update(changes)
        return Record(id=self.id, fields=merged)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, **self.fields}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Record:
        values = dict(data)
        identifier = values.pop("id", None)
        return cls(id=identifier, fields=values)


@dataclass(frozen=True)
class Money:
    """Immutable amount of a single currency, compared by value."""

    amount: float
    currency: str

    def add(self, other: Money) -> Money:
        if other.currency != self.currency:
            raise ValueError(
                f"Cannot add {other.currency} to {self.currency}"
            )
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"


@dataclass(frozen=True)
class UserDTO:
    """Transfer object for users crossing the service boundary."""

    first_name: str
    last_name: str
    email: str
    id: Identifier | None = None


@dataclass(frozen=True)
class Product:
    name: str
    price: float
    id: Identifier | None = None


@dataclass(frozen=True)
class Order:
    """
    A customer order.

    ``items`` holds product references; the order itself does not
    resolve them against the product store.
    """

    total: Money
    items: Sequence[str] = field(default_factory=tuple)
    id: Identifier | None = None


@dataclass(frozen=True)
class StoreConfig:
    """Store settings loaded from config.json."""

    backend: str = "sqlite"  # "memory" | "sqlite"
    db_path: str = "entity_store.db"
    allow_overwrite: bool = False
    id_strategy: str = "sequential"  # "sequential" | "uuid"


__all__ = [
    "Identifier",
    "Scalar",
    "Record",
    "Money",
    "UserDTO",
    "Product",
    "Order",
    "StoreConfig",
]
