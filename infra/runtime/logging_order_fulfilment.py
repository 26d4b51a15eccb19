from __future__ import annotations

from domain.models import Order
from domain.ports import LoggerPort


class LoggingOrderFulfilment:
    """
    ``OrderFulfilmentPort`` that only records each step in the log.

    Inventory, payment, shipping and e-mail are outside this project;
    the steps are logged so an operator can follow an order through.
    """

    def __init__(self, logger: LoggerPort) -> None:
        self._logger = logger

    def reserve_items(self, order: Order) -> None:
        self._logger.info("reserving items", order_id=order.id, items=list(order.items))

    def process_payment(self, order: Order) -> None:
        self._logger.info(
            "processing payment",
            order_id=order.id,
            amount=order.total.amount,
            currency=order.total.currency,
        )

    def schedule_shipping(self, order: Order) -> None:
        self._logger.info("scheduling shipping", order_id=order.id)

    def send_confirmation(self, order: Order) -> None:
        self._logger.info("sending order confirmation", order_id=order.id)
