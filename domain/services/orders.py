from __future__ import annotations

import json
from dataclasses import replace
from typing import Sequence

from domain.models import Identifier, Money, Order, Record
from domain.ports import EntityStorePort, LoggerPort, OrderFulfilmentPort


class OrderService:
    """
    Places orders and reads them back.

    ``place_order`` drives the whole flow behind one call: items are
    reserved and paid for before the order is persisted, shipping and the
    confirmation follow once it has an identifier. A failing step stops
    the flow and propagates; earlier steps are not undone.
    """

    def __init__(
        self,
        store: EntityStorePort,
        fulfilment: OrderFulfilmentPort,
        logger: LoggerPort,
    ) -> None:
        self._store = store
        self._fulfilment = fulfilment
        self._logger = logger

    def place_order(self, order: Order) -> Order:
        self._fulfilment.reserve_items(order)
        self._fulfilment.process_payment(order)
        order_id = self._store.create(self._to_record(order))
        placed = replace(order, id=order_id)
        self._fulfilment.schedule_shipping(placed)
        self._fulfilment.send_confirmation(placed)
        self._logger.info(
            "order placed",
            order_id=order_id,
            total=str(placed.total),
            item_count=len(placed.items),
        )
        return placed

    def get_order(self, order_id: Identifier) -> Order:
        return self._to_order(self._store.read(order_id))

    def list_orders(self) -> Sequence[Order]:
        return [self._to_order(r) for r in self._store.find_all()]

    # Items are JSON-encoded so names may hold commas or surrounding spaces.
    @staticmethod
    def _to_record(order: Order) -> Record:
        return Record(
            id=order.id,
            fields={
                "amount": order.total.amount,
                "currency": order.total.currency,
                "items": json.dumps(list(order.items)),
            },
        )

    @staticmethod
    def _to_order(record: Record) -> Order:
        return Order(
            id=record.id,
            total=Money(
                amount=float(record.get("amount", 0.0) or 0.0),
                currency=str(record.get("currency", "")),
            ),
            items=tuple(json.loads(str(record.get("items") or "[]"))),
        )
