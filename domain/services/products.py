from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from domain.models import Identifier, Product, Record
from domain.ports import EntityStorePort, LoggerPort


class ProductService:
    def __init__(self, store: EntityStorePort, logger: LoggerPort) -> None:
        self._store = store
        self._logger = logger

    def find_all(self) -> Sequence[Product]:
        return [self._to_product(r) for r in self._store.find_all()]

    def find_by_id(self, product_id: Identifier) -> Product | None:
        record = self._store.find_by_id(product_id)
        return self._to_product(record) if record is not None else None

    def save(self, product: Product) -> Product:
        """Insert a new product or replace an existing one with the same id."""
        product_id = self._store.save(
            Record(id=product.id, fields={"name": product.name, "price": product.price}),
        )
        self._logger.info("product saved", product_id=product_id)
        return replace(product, id=product_id)

    @staticmethod
    def _to_product(record: Record) -> Product:
        return Product(
            id=record.id,
            name=str(record.get("name", "")),
            price=float(record.get("price", 0.0) or 0.0),
        )
